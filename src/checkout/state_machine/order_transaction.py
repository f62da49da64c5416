"""Default transition engine for order payment transactions.

Resolves the order owning a transaction, applies the action through the
Order aggregate (which validates it against the transition table) and
persists the order under the given scope.
"""

import structlog
from protean.exceptions import ConfigurationError, ObjectNotFoundError
from protean.utils.globals import current_domain

from checkout.order.order import Order
from checkout.order.states import INITIAL_STATE, ORDER_TRANSACTION_STATE_MACHINE, TransitionAction
from checkout.shared.scope import ExecutionScope, require_system_scope
from checkout.state_machine.port import TransitionEngine

logger = structlog.get_logger(__name__)

_INITIAL_STATES = {
    ORDER_TRANSACTION_STATE_MACHINE: INITIAL_STATE.value,
}


class OrderTransactionStateMachine(TransitionEngine):
    """Transition engine backed by the static order_transaction.state table."""

    def initial_state(self, machine_name: str) -> str:
        try:
            return _INITIAL_STATES[machine_name]
        except KeyError:
            raise ConfigurationError(f"Unknown state machine `{machine_name}`") from None

    def transition(
        self,
        transaction_id: str,
        action: TransitionAction,
        scope: ExecutionScope,
    ) -> str:
        require_system_scope(scope, "Transitioning order transactions")

        repo = current_domain.repository_for(Order)
        order = repo.find_by_transaction(transaction_id)
        if order is None:
            raise ObjectNotFoundError(f"Order transaction {transaction_id} does not exist")

        new_state = order.apply_transition(transaction_id, TransitionAction(action))
        repo.save(order, scope)

        logger.info(
            "Order transaction transitioned",
            order_id=str(order.id),
            transaction_id=str(transaction_id),
            action=TransitionAction(action).value,
            to_state=new_state.value,
            actor_id=scope.actor_id,
        )
        return new_state.value
