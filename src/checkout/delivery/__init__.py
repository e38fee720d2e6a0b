"""Delivery method factory."""

from checkout.delivery.courier import Courier
from checkout.delivery.pickup_point import PickUpPoint
from checkout.delivery.port import DeliveryMethod
from checkout.delivery.post import Post
from checkout.sink.port import OutputSink

DELIVERY_METHODS: dict[str, type[DeliveryMethod]] = {
    Courier.name: Courier,
    Post.name: Post,
    PickUpPoint.name: PickUpPoint,
}


def get_delivery_method(name: str, sink: OutputSink | None = None) -> DeliveryMethod:
    """Build a delivery method by name ("courier", "post", "pickup_point")."""
    try:
        method_class = DELIVERY_METHODS[name]
    except KeyError:
        raise ValueError(f"Unknown delivery method: {name}") from None
    return method_class(sink=sink)
