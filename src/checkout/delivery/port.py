"""Delivery method port: abstract interface for handing an order over.

Receives the whole Order so that a method may inspect its contents; the
current methods only announce how the order travels.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from checkout.sink import SinkEmitter

if TYPE_CHECKING:
    from checkout.order.order import Order


class DeliveryMethod(SinkEmitter, ABC):
    """Abstract interface for delivery methods."""

    name: str = ""

    @abstractmethod
    def deliver_order(self, order: Order) -> None:
        """Hand the order over for delivery."""
        ...
