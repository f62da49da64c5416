"""Order placement: command and handler.

Creates an order for a customer with its first payment transaction in the
initial state. The chosen payment method must be offered to the sales
channel and currency the order is placed in.
"""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.order.order import Order
from checkout.payment_method.catalog import PaymentMethodCatalog
from checkout.shared.context import DEFAULT_CURRENCY, DEFAULT_SALES_CHANNEL, SalesContext
from checkout.shared.errors import UnknownPaymentMethod
from checkout.shared.price import CalculatedPrice
from checkout.shared.scope import ExecutionScope

logger = structlog.get_logger(__name__)


@checkout.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    payment_method_id = Identifier(required=True)
    total_price = Float(required=True, min_value=0.0)
    calculated_taxes = Text()  # JSON: list of {tax, tax_rate, price}
    tax_rules = Text()  # JSON: list of {tax_rate, percentage}
    sales_channel_id = String(max_length=255, default=DEFAULT_SALES_CHANNEL)
    currency = String(max_length=3, default=DEFAULT_CURRENCY)


@checkout.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        sales_channel_id = command.sales_channel_id or DEFAULT_SALES_CHANNEL
        currency = command.currency or DEFAULT_CURRENCY

        context = SalesContext(
            sales_channel_id=sales_channel_id,
            currency=currency,
            customer_id=str(command.customer_id),
        )
        if not PaymentMethodCatalog().is_available(command.payment_method_id, context):
            raise UnknownPaymentMethod(command.payment_method_id)

        price = CalculatedPrice.build(
            total_price=command.total_price,
            calculated_taxes=json.loads(command.calculated_taxes) if command.calculated_taxes else None,
            tax_rules=json.loads(command.tax_rules) if command.tax_rules else None,
            currency=currency,
        )
        order = Order.place(
            customer_id=command.customer_id,
            price=price,
            payment_method_id=command.payment_method_id,
            sales_channel_id=sales_channel_id,
            currency=currency,
        )
        current_domain.repository_for(Order).save(
            order,
            ExecutionScope.system(on_behalf_of=command.customer_id),
        )

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            payment_method_id=str(command.payment_method_id),
        )
        return str(order.id)
