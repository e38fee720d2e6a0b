"""Checkout demo: builds one order and walks it through payment and delivery.

Usage:
    checkout-demo
    checkout-demo --discount 15 --payment paypal --delivery pickup_point --notify SMS
"""

import argparse

from checkout.delivery import DELIVERY_METHODS, get_delivery_method
from checkout.discount import discount_for
from checkout.domain import checkout
from checkout.notification import get_notifier
from checkout.notification.port import NotificationChannel
from checkout.order.order import Order
from checkout.payment import PAYMENT_METHODS, get_payment_method
from checkout.sink import get_sink
from checkout.sink.port import OutputSink

DEMO_ITEMS = [
    ("Laptop", 1, 1000),
    ("Keyboard", 2, 50),
]


def run_demo(
    discount: float = 10,
    payment: str = "credit_card",
    delivery: str = "courier",
    notify: str = NotificationChannel.EMAIL.value,
    sink: OutputSink | None = None,
) -> float:
    """Run the checkout flow once and return the discounted total."""
    sink = sink if sink is not None else get_sink()

    order = Order()
    for product_name, quantity, price in DEMO_ITEMS:
        order.add_item(product_name, quantity, price)

    order.payment_method = get_payment_method(payment, sink=sink)
    order.delivery_method = get_delivery_method(delivery, sink=sink)

    total_price = order.calculate_total_price(discount_for(discount))
    sink.emit(f"Order total after discount: {total_price}")

    order.process_payment()
    order.deliver_order()

    get_notifier(notify, sink=sink).send_notification("Your order has been placed!")
    return total_price


def main(argv=None):
    parser = argparse.ArgumentParser(description="Intermag checkout demo")
    parser.add_argument("--discount", type=float, default=10, help="Discount percentage (default: 10)")
    parser.add_argument(
        "--payment",
        choices=sorted(PAYMENT_METHODS),
        default="credit_card",
        help="Payment method (default: credit_card)",
    )
    parser.add_argument(
        "--delivery",
        choices=sorted(DELIVERY_METHODS),
        default="courier",
        help="Delivery method (default: courier)",
    )
    parser.add_argument(
        "--notify",
        choices=[c.value for c in NotificationChannel],
        default=NotificationChannel.EMAIL.value,
        help="Notification channel (default: Email)",
    )
    args = parser.parse_args(argv)

    from checkout.utils.logging import configure_logging

    configure_logging()
    checkout.init()

    with checkout.domain_context():
        run_demo(
            discount=args.discount,
            payment=args.payment,
            delivery=args.delivery,
            notify=args.notify,
        )


if __name__ == "__main__":
    main()
