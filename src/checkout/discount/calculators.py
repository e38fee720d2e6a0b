"""Discount calculators."""

from checkout.discount.port import DiscountCalculator


class NoDiscount(DiscountCalculator):
    """Leaves the total unchanged."""

    def apply_discount(self, total: float) -> float:
        return total

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount(DiscountCalculator):
    """Takes a percentage off the total.

    The percentage is not clamped: values above 100 produce a negative
    total and negative values raise it.
    """

    def __init__(self, percentage: float) -> None:
        self._percentage = float(percentage)

    @property
    def percentage(self) -> float:
        return self._percentage

    def apply_discount(self, total: float) -> float:
        return total * (1 - self._percentage / 100)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PercentageDiscount):
            return NotImplemented
        return self._percentage == other._percentage

    def __hash__(self) -> int:
        return hash((PercentageDiscount, self._percentage))

    def __repr__(self) -> str:
        return f"PercentageDiscount(percentage={self._percentage})"
