"""Payment method port: abstract interface for charging an order.

Order programs against this port; concrete channels are chosen by the
caller and attached to the order. Processing always succeeds and returns
nothing: the only observable effect is the confirmation emitted to the
output sink.
"""

from abc import ABC, abstractmethod

from checkout.sink import SinkEmitter


class PaymentMethod(SinkEmitter, ABC):
    """Abstract interface for payment methods."""

    name: str = ""

    @abstractmethod
    def process_payment(self, amount: float) -> None:
        """Charge the given amount. Amounts are not validated."""
        ...
