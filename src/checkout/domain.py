"""Checkout bounded context: Order aggregate and its strategy families.

Accumulates line items on an Order, prices it through a discount strategy,
charges a payment method, hands the order to a delivery method, and
notifies the customer over a notification channel.
"""

import structlog
from protean.domain import Domain

checkout = Domain(name="checkout")

logger = structlog.get_logger(__name__)
