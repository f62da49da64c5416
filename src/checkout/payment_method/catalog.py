"""Payment method catalog: which payment methods a sales context may use."""

from protean.utils.globals import current_domain

from checkout.payment_method.payment_method import PaymentMethod
from checkout.shared.context import SalesContext


class PaymentMethodCatalog:
    def list_available(self, context: SalesContext) -> list[PaymentMethod]:
        """Active payment methods offered to ``context``, ordered by position then name."""
        repo = current_domain.repository_for(PaymentMethod)
        candidates = repo._dao.query.filter(active=True).all().items
        available = [pm for pm in candidates if pm.is_available_in(context)]
        return sorted(available, key=lambda pm: (pm.position or 0, pm.name))

    def is_available(self, payment_method_id, context: SalesContext) -> bool:
        if not payment_method_id:
            return False
        return any(str(pm.id) == str(payment_method_id) for pm in self.list_available(context))
