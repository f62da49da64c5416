"""Order aggregate with OrderTransaction entities.

An order carries one payment transaction per payment attempt. Transactions
are appended in creation order and never removed; a superseded transaction
is moved to the terminal ``cancelled`` state instead.
"""

from datetime import UTC, datetime
from uuid import uuid4

from protean import invariant
from protean.exceptions import InvalidStateError, ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, ValueObject

from checkout.domain import checkout
from checkout.order.events import OrderPlaced, TransactionCreated, TransactionStateChanged
from checkout.order.states import (
    INITIAL_STATE,
    TransactionState,
    TransitionAction,
    target_state,
)
from checkout.shared.context import DEFAULT_CURRENCY, DEFAULT_SALES_CHANNEL
from checkout.shared.price import CalculatedPrice


def _generate_order_number():
    return f"{datetime.now(UTC):%Y%m%d}-{uuid4().hex[:8].upper()}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@checkout.entity(part_of="Order")
class OrderTransaction:
    """A single payment intent for an order.

    ``status`` holds the technical name of the transaction's state in the
    ``order_transaction.state`` machine. It may be empty for transactions
    imported without a state. ``amount`` is copied from the order total when
    the transaction is created and never recomputed.
    """

    payment_method_id = Identifier(required=True)
    status = String(max_length=50, choices=TransactionState)
    amount = ValueObject(CalculatedPrice)
    position = Integer(default=0, min_value=0)
    created_at = DateTime()

    @property
    def is_live(self) -> bool:
        """True when the transaction has a state other than ``cancelled``."""
        return bool(self.status) and self.status != TransactionState.CANCELLED.value

    def uses(self, payment_method_id) -> bool:
        return self.is_live and str(self.payment_method_id) == str(payment_method_id)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@checkout.aggregate
class Order:
    customer_id = Identifier(required=True)
    order_number = String(max_length=64, default=_generate_order_number)
    sales_channel_id = String(max_length=255, default=DEFAULT_SALES_CHANNEL)
    currency = String(max_length=3, default=DEFAULT_CURRENCY)
    price = ValueObject(CalculatedPrice, required=True)
    transactions = HasMany(OrderTransaction)
    placed_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def transaction_positions_must_be_unique(self):
        positions = [t.position for t in self.transactions or []]
        if len(positions) != len(set(positions)):
            raise ValidationError({"transactions": ["Transaction positions must be unique"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_id,
        price,
        payment_method_id,
        sales_channel_id=DEFAULT_SALES_CHANNEL,
        currency=DEFAULT_CURRENCY,
    ):
        """Place an order and open its first payment transaction.

        Args:
            customer_id: The customer the order belongs to.
            price: CalculatedPrice with the order total and tax breakdown.
            payment_method_id: Payment method chosen at checkout.
            sales_channel_id: Sales channel the order was placed in.
            currency: ISO currency code of the order.
        """
        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            sales_channel_id=sales_channel_id,
            currency=currency,
            price=price,
            placed_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                customer_id=str(customer_id),
                sales_channel_id=sales_channel_id,
                currency=currency,
                total_price=price.total_price,
                payment_method_id=str(payment_method_id),
                placed_at=now,
            )
        )
        order.create_transaction(payment_method_id, INITIAL_STATE.value)
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def transactions_in_creation_order(self):
        """Transactions sorted by the position they were created at."""
        return sorted(self.transactions or [], key=lambda t: t.position)

    def get_transaction(self, transaction_id):
        return next((t for t in self.transactions or [] if str(t.id) == str(transaction_id)), None)

    @property
    def effective_transaction(self):
        """The most recently created transaction that is not cancelled, if any."""
        live = [t for t in self.transactions_in_creation_order() if t.is_live]
        return live[-1] if live else None

    # -------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------
    def create_transaction(self, payment_method_id, state):
        """Append a new transaction charging the order total with ``payment_method_id``."""
        now = datetime.now(UTC)
        position = max((t.position for t in self.transactions or []), default=-1) + 1

        transaction = OrderTransaction(
            payment_method_id=str(payment_method_id),
            status=state,
            amount=self.price.as_total(),
            position=position,
            created_at=now,
        )
        self.add_transactions(transaction)
        self.updated_at = now

        self.raise_(
            TransactionCreated(
                order_id=str(self.id),
                transaction_id=str(transaction.id),
                payment_method_id=str(payment_method_id),
                state=state,
                amount=transaction.amount.total_price,
                position=position,
                created_at=now,
            )
        )
        return transaction

    def apply_transition(self, transaction_id, action: TransitionAction) -> TransactionState:
        """Move a transaction along the state machine. Called by the transition engine.

        A transaction without a state is treated as being in the initial state.
        """
        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            raise ValidationError({"transaction_id": [f"Transaction {transaction_id} not found on order"]})

        current = TransactionState(transaction.status) if transaction.status else INITIAL_STATE
        target = target_state(current, action)
        if target is None:
            raise InvalidStateError(
                f"Transition `{action.value}` is not allowed from state `{current.value}` "
                f"for transaction {transaction_id}"
            )

        now = datetime.now(UTC)
        previous = transaction.status
        transaction.status = target.value
        self.updated_at = now

        self.raise_(
            TransactionStateChanged(
                order_id=str(self.id),
                transaction_id=str(transaction_id),
                action=action.value,
                from_state=previous,
                to_state=target.value,
                changed_at=now,
            )
        )
        return target