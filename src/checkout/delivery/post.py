"""Postal delivery."""

import structlog

from checkout.delivery.port import DeliveryMethod

logger = structlog.get_logger(__name__)


class Post(DeliveryMethod):
    name = "post"

    def deliver_order(self, order) -> None:
        self.emit("Order delivered by post.")
        logger.info("Order delivered", delivery_method=self.name, order_id=order.order_id)
