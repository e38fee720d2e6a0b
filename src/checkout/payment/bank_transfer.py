"""Bank transfer payment method."""

import structlog

from checkout.payment.port import PaymentMethod

logger = structlog.get_logger(__name__)


class BankTransfer(PaymentMethod):
    """Pays by bank transfer. Settlement is assumed immediate."""

    name = "bank_transfer"

    def process_payment(self, amount: float) -> None:
        self.emit(f"Payment of {amount} processed by bank transfer.")
        logger.info("Payment processed", payment_method=self.name, amount=amount)
