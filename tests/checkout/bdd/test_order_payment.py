"""BDD tests for switching the payment method of an order."""

from checkout.order.payment import SetOrderPayment
from checkout.shared.errors import OrderNotFound, UnknownPaymentMethod
from protean import current_domain
from protean.exceptions import ProteanException
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/order_payment.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer "{customer_id}" switches the order to "{technical_name}"'))
def _(order_id, payment_methods, error, customer_id, technical_name):
    try:
        current_domain.process(
            SetOrderPayment(
                order_id=order_id,
                customer_id=customer_id,
                payment_method_id=payment_methods[technical_name],
            ),
            asynchronous=False,
        )
    except ProteanException as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request fails because the order was not found")
def _(error):
    assert isinstance(error["exc"], OrderNotFound)


@then("the request fails because the payment method is unknown")
def _(error):
    assert isinstance(error["exc"], UnknownPaymentMethod)
