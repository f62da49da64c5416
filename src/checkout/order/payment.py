"""Order payment switching: command and handler.

Lets a customer change the payment method of one of their orders. If a live
transaction already uses the requested method nothing happens. Otherwise the
order's transactions are cancelled in creation order and a fresh transaction
in the machine's initial state is created for the requested method.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.order.order import Order
from checkout.order.states import ORDER_TRANSACTION_STATE_MACHINE, TransactionState, TransitionAction
from checkout.payment_method.catalog import PaymentMethodCatalog
from checkout.shared.context import SalesContext
from checkout.shared.errors import OrderNotFound, UnknownPaymentMethod
from checkout.shared.scope import ExecutionScope
from checkout.state_machine import get_transition_engine

logger = structlog.get_logger(__name__)


@checkout.command(part_of="Order")
class SetOrderPayment:
    """Switch the payment method of a customer's order."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    payment_method_id = Identifier(required=True)


@checkout.command_handler(part_of=Order)
class SetOrderPaymentHandler:
    @handle(SetOrderPayment)
    def set_order_payment(self, command):
        repo = current_domain.repository_for(Order)

        order = repo.find_for_customer(command.order_id, command.customer_id)
        if order is None:
            raise OrderNotFound(command.order_id)

        context = SalesContext.for_order(order)
        if not PaymentMethodCatalog().is_available(command.payment_method_id, context):
            raise UnknownPaymentMethod(command.payment_method_id)

        engine = get_transition_engine()
        scope = ExecutionScope.system(on_behalf_of=command.customer_id)

        if self._try_transition(order, str(command.payment_method_id), engine, scope):
            logger.info(
                "Order already uses payment method",
                order_id=str(order.id),
                payment_method_id=str(command.payment_method_id),
            )
            return

        initial_state = engine.initial_state(ORDER_TRANSACTION_STATE_MACHINE)
        transaction = repo.create_transaction(
            order_id=order.id,
            payment_method_id=command.payment_method_id,
            state=initial_state,
            scope=scope,
        )
        logger.info(
            "Order payment method changed",
            order_id=str(order.id),
            transaction_id=str(transaction.id),
            payment_method_id=str(command.payment_method_id),
        )

    @staticmethod
    def _try_transition(order, payment_method_id, engine, scope) -> bool:
        """Cancel transactions until one already using ``payment_method_id`` is found.

        Returns True when such a transaction exists. Transactions before it
        have been cancelled by then; transactions after it are left alone.
        Already cancelled transactions are terminal and are skipped.
        """
        for transaction in order.transactions_in_creation_order():
            if transaction.uses(payment_method_id):
                return True

            if transaction.status == TransactionState.CANCELLED.value:
                continue

            engine.transition(str(transaction.id), TransitionAction.CANCEL, scope)

        return False
