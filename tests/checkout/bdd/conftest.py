"""Shared BDD fixtures and step definitions for the Checkout domain."""

import pytest
from checkout.order.order import Order
from checkout.order.placement import PlaceOrder
from checkout.payment_method.management import DeactivatePaymentMethod, RegisterPaymentMethod
from protean import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def payment_methods():
    """Technical name → payment method id."""
    return {}


@pytest.fixture()
def error():
    """Container for the exception raised by the last When step."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the payment methods "{first}", "{second}" and "{third}" are active'))
def _(payment_methods, first, second, third):
    for position, technical_name in enumerate((first, second, third), start=1):
        payment_methods[technical_name] = current_domain.process(
            RegisterPaymentMethod(
                name=technical_name.replace("_", " ").title(),
                technical_name=technical_name,
                position=position,
            ),
            asynchronous=False,
        )


@given(parsers.cfparse('the payment method "{technical_name}" is deactivated'))
def _(payment_methods, technical_name):
    current_domain.process(
        DeactivatePaymentMethod(payment_method_id=payment_methods[technical_name]),
        asynchronous=False,
    )


@given(
    parsers.cfparse('the customer "{customer_id}" placed an order paying with "{technical_name}"'),
    target_fixture="order_id",
)
def _(payment_methods, customer_id, technical_name):
    return current_domain.process(
        PlaceOrder(
            customer_id=customer_id,
            payment_method_id=payment_methods[technical_name],
            total_price=59.5,
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request succeeds")
def _(error):
    assert error["exc"] is None


@then(parsers.cfparse('the order transactions are "{expected}"'))
def _(order_id, payment_methods, expected):
    names = {pm_id: name for name, pm_id in payment_methods.items()}
    order = current_domain.repository_for(Order).get(order_id)
    actual = ", ".join(
        f"{names[t.payment_method_id]}:{t.status}" for t in order.transactions_in_creation_order()
    )
    assert actual == expected
