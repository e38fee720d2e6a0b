"""Courier delivery."""

import structlog

from checkout.delivery.port import DeliveryMethod

logger = structlog.get_logger(__name__)


class Courier(DeliveryMethod):
    name = "courier"

    def deliver_order(self, order) -> None:
        self.emit("Order delivered by courier.")
        logger.info("Order delivered", delivery_method=self.name, order_id=order.order_id)
