"""Checkout bounded context: orders, their payment transactions and payment methods.

Handles switching the payment method of a placed order: the order's
transactions are driven through the ``order_transaction.state`` machine and
new transactions are validated against the payment methods available to
the order's sales channel.
"""

from protean.domain import Domain

from checkout.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

checkout = Domain(name="checkout")
