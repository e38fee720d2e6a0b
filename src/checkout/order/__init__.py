"""Order aggregate."""

from checkout.order.order import Order, OrderItem

__all__ = ["Order", "OrderItem"]
