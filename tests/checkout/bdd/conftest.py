"""Shared BDD fixtures and step definitions for the Checkout domain."""

import pytest
from checkout.delivery import get_delivery_method
from checkout.order.order import Order
from checkout.payment import get_payment_method
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def result():
    """Container for the last calculated total."""
    return {"total": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a new order", target_fixture="order")
def new_order():
    return Order()


@given(parsers.cfparse('the order contains {quantity:d} "{product_name}" at {price:g}'))
def order_contains(order, quantity, product_name, price):
    order.add_item(product_name, quantity, price)


@given(parsers.cfparse('the order is paid by "{name}"'))
def order_paid_by(order, name):
    order.payment_method = get_payment_method(name)


@given(parsers.cfparse('the order is delivered by "{name}"'))
def order_delivered_by(order, name):
    order.delivery_method = get_delivery_method(name)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the total is {expected:g}"))
def total_is(result, expected):
    assert result["total"] == pytest.approx(expected)


@then(parsers.cfparse('the output is "{message}"'))
def output_is(output_sink, message):
    assert output_sink.last_message == message


@then("nothing is output")
def nothing_output(output_sink):
    assert output_sink.messages == []


@then(parsers.cfparse('the order fails with "{message}"'))
def order_fails(error, message):
    assert error["exc"] is not None
    assert message in error["exc"].messages["discount_calculator"]
