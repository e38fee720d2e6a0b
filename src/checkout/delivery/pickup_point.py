"""Pickup point delivery: the customer collects the order."""

import structlog

from checkout.delivery.port import DeliveryMethod

logger = structlog.get_logger(__name__)


class PickUpPoint(DeliveryMethod):
    name = "pickup_point"

    def deliver_order(self, order) -> None:
        self.emit("Order is ready for collection at the pickup point.")
        logger.info("Order awaiting pickup", delivery_method=self.name, order_id=order.order_id)
