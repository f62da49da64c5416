"""Domain events for the Order aggregate and its payment transactions."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from checkout.domain import checkout


@checkout.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order with an initial payment transaction."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True, max_length=64)
    customer_id = Identifier(required=True)
    sales_channel_id = String(required=True, max_length=255)
    currency = String(max_length=3)
    total_price = Float(required=True)
    payment_method_id = Identifier(required=True)
    placed_at = DateTime(required=True)


@checkout.event(part_of="Order")
class TransactionCreated:
    """A new payment transaction was attached to an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    transaction_id = Identifier(required=True)
    payment_method_id = Identifier(required=True)
    state = String(required=True, max_length=50)
    amount = Float(required=True)
    position = Integer(required=True)
    created_at = DateTime(required=True)


@checkout.event(part_of="Order")
class TransactionStateChanged:
    """A payment transaction moved through the order_transaction.state machine."""

    __version__ = 1

    order_id = Identifier(required=True)
    transaction_id = Identifier(required=True)
    action = String(required=True, max_length=50)
    from_state = String(max_length=50)
    to_state = String(required=True, max_length=50)
    changed_at = DateTime(required=True)
