"""PayPal payment method."""

import structlog

from checkout.payment.port import PaymentMethod

logger = structlog.get_logger(__name__)


class PayPal(PaymentMethod):
    name = "paypal"

    def process_payment(self, amount: float) -> None:
        self.emit(f"Payment of {amount} processed via PayPal.")
        logger.info("Payment processed", payment_method=self.name, amount=amount)
