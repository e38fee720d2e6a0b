"""Discount calculator port: abstract interface for pricing strategies."""

from abc import ABC, abstractmethod


class DiscountCalculator(ABC):
    """Abstract interface for discount strategies.

    Implementations are pure: the same total always yields the same result
    and nothing is emitted.
    """

    @abstractmethod
    def apply_discount(self, total: float) -> float:
        """Return the total after the discount is applied."""
        ...
