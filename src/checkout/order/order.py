"""Order aggregate: line items plus the strategies attached to them.

The Order knows nothing about concrete payment, delivery or discount
implementations. It holds one optional PaymentMethod and one optional
DeliveryMethod and delegates to whichever are attached:

    order = Order()
    order.add_item("Laptop", 1, 1000)
    order.payment_method = CreditCard()
    order.delivery_method = Courier()
    order.calculate_total_price(PercentageDiscount(10))  # 990.0
    order.process_payment()  # charges 1100.0
    order.deliver_order()

Operations may be called in any order. An unset payment or delivery method
turns the matching operation into a no-op.
"""

from uuid import uuid4

import structlog
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, Text

from checkout.delivery.port import DeliveryMethod
from checkout.discount import DiscountCalculator, NoDiscount
from checkout.domain import checkout
from checkout.payment.port import PaymentMethod

logger = structlog.get_logger(__name__)


@checkout.value_object
class OrderItem:
    """A purchased line: product name, quantity and unit price.

    Values are recorded as given: names may be empty or of any length, and
    zero and negative quantities and prices are accepted.
    """

    product_name = Text()
    quantity = Integer(required=True)
    price = Float(required=True)

    @property
    def line_total(self) -> float:
        return self.quantity * self.price


class Order:
    def __init__(self) -> None:
        self.order_id: str = uuid4().hex
        self._items: list[OrderItem] = []
        self.payment_method: PaymentMethod | None = None
        self.delivery_method: DeliveryMethod | None = None

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Line items in insertion order. Items are only ever appended."""
        return tuple(self._items)

    def add_item(self, product_name: str, quantity: int, price: float) -> None:
        self._items.append(OrderItem(product_name=product_name, quantity=quantity, price=price))
        logger.debug(
            "Item added",
            order_id=self.order_id,
            product_name=product_name,
            quantity=quantity,
            price=price,
        )

    def calculate_total_price(self, discount_calculator: DiscountCalculator) -> float:
        """Sum quantity * price over all items, then apply the discount.

        Does not cache or store the result.
        """
        if discount_calculator is None:
            raise ValidationError({"discount_calculator": ["Discount calculator is required"]})

        total = 0.0
        for item in self._items:
            total += item.line_total
        return discount_calculator.apply_discount(total)

    def process_payment(self) -> None:
        """Charge the attached payment method with the undiscounted total.

        Any discount used for calculate_total_price() is not applied here:
        the billed amount is always the full item total.
        """
        if self.payment_method is None:
            return

        amount = self.calculate_total_price(NoDiscount())
        logger.info(
            "Processing payment",
            order_id=self.order_id,
            payment_method=self.payment_method.name,
            amount=amount,
        )
        self.payment_method.process_payment(amount)

    def deliver_order(self) -> None:
        """Hand this order to the attached delivery method."""
        if self.delivery_method is None:
            return

        logger.info(
            "Delivering order",
            order_id=self.order_id,
            delivery_method=self.delivery_method.name,
        )
        self.delivery_method.deliver_order(self)
