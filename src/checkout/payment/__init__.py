"""Payment method factory.

Maps the payment method names accepted by the demo driver and other
callers onto concrete PaymentMethod classes.
"""

from checkout.payment.bank_transfer import BankTransfer
from checkout.payment.credit_card import CreditCard
from checkout.payment.paypal import PayPal
from checkout.payment.port import PaymentMethod
from checkout.sink.port import OutputSink

PAYMENT_METHODS: dict[str, type[PaymentMethod]] = {
    CreditCard.name: CreditCard,
    PayPal.name: PayPal,
    BankTransfer.name: BankTransfer,
}


def get_payment_method(name: str, sink: OutputSink | None = None) -> PaymentMethod:
    """Build a payment method by name ("credit_card", "paypal", "bank_transfer")."""
    try:
        method_class = PAYMENT_METHODS[name]
    except KeyError:
        raise ValueError(f"Unknown payment method: {name}") from None
    return method_class(sink=sink)
