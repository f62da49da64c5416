"""Order repository: the order store used by the checkout workflows.

Reads are filtered by the owning customer where a caller is involved. Writes
take an explicit ExecutionScope and are only performed with system rights.
"""

from protean.exceptions import ObjectNotFoundError

from checkout.domain import checkout
from checkout.order.order import Order, OrderTransaction
from checkout.shared.scope import ExecutionScope, require_system_scope


@checkout.repository(part_of=Order)
class OrderRepository:
    def find_for_customer(self, order_id, customer_id) -> Order | None:
        """Find an order by id, but only if it belongs to ``customer_id``."""
        if not order_id or not customer_id:
            return None
        return self._dao.query.filter(id=str(order_id), customer_id=str(customer_id)).all().first

    def find_by_transaction(self, transaction_id) -> Order | None:
        """Find the order owning a payment transaction."""
        transaction_dao = self._domain.repository_for(OrderTransaction)._dao
        try:
            transaction = transaction_dao.get(str(transaction_id))
        except ObjectNotFoundError:
            return None
        return self._dao.query.filter(id=str(transaction.order_id)).all().first

    def save(self, order: Order, scope: ExecutionScope) -> Order:
        require_system_scope(scope, "Writing orders")
        return self.add(order)

    def create_transaction(self, order_id, payment_method_id, state, scope: ExecutionScope) -> OrderTransaction:
        """Attach a new transaction to an order and persist it."""
        require_system_scope(scope, "Creating order transactions")
        order = self.get(str(order_id))
        transaction = order.create_transaction(payment_method_id, state)
        self.add(order)
        return transaction
