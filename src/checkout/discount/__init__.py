"""Discount strategies."""

from checkout.discount.calculators import NoDiscount, PercentageDiscount
from checkout.discount.port import DiscountCalculator

__all__ = ["DiscountCalculator", "NoDiscount", "PercentageDiscount", "discount_for"]


def discount_for(percentage: float | None) -> DiscountCalculator:
    """Return the calculator for a percentage; no percentage means no discount."""
    if not percentage:
        return NoDiscount()
    return PercentageDiscount(percentage)
