"""Credit card payment method."""

import structlog

from checkout.payment.port import PaymentMethod

logger = structlog.get_logger(__name__)


class CreditCard(PaymentMethod):
    name = "credit_card"

    def process_payment(self, amount: float) -> None:
        self.emit(f"Payment of {amount} processed by credit card.")
        logger.info("Payment processed", payment_method=self.name, amount=amount)
