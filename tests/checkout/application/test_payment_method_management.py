"""Application tests for payment method management and the catalog."""

import pytest
from checkout.payment_method.catalog import PaymentMethodCatalog
from checkout.payment_method.management import ActivatePaymentMethod, DeactivatePaymentMethod
from checkout.payment_method.payment_method import PaymentMethod
from checkout.shared.context import SalesContext
from checkout_helpers import register_payment_method
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


class TestRegisterPaymentMethod:
    def test_persists_payment_method(self):
        pm_id = register_payment_method(
            "payment_invoice",
            description="Pay within 14 days",
            position=3,
            sales_channel_ids=["web"],
            currencies=["EUR"],
        )

        pm = current_domain.repository_for(PaymentMethod).get(pm_id)
        assert pm.name == "Payment Invoice"
        assert pm.technical_name == "payment_invoice"
        assert pm.description == "Pay within 14 days"
        assert pm.position == 3
        assert pm.active is True
        assert pm.assigned_sales_channels == ["web"]
        assert pm.allowed_currencies == ["EUR"]


class TestActivation:
    def test_deactivate_and_activate(self):
        pm_id = register_payment_method("payment_invoice")
        repo = current_domain.repository_for(PaymentMethod)

        current_domain.process(DeactivatePaymentMethod(payment_method_id=pm_id), asynchronous=False)
        assert repo.get(pm_id).active is False

        current_domain.process(ActivatePaymentMethod(payment_method_id=pm_id), asynchronous=False)
        assert repo.get(pm_id).active is True

    def test_activate_active_method(self):
        pm_id = register_payment_method("payment_invoice")
        with pytest.raises(ValidationError):
            current_domain.process(ActivatePaymentMethod(payment_method_id=pm_id), asynchronous=False)

    def test_unknown_payment_method(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeactivatePaymentMethod(payment_method_id="missing"), asynchronous=False)


class TestCatalog:
    def test_lists_available_methods_by_position_then_name(self):
        register_payment_method("payment_zeta", position=1)
        register_payment_method("payment_alpha", position=1)
        register_payment_method("payment_first", position=0)

        available = PaymentMethodCatalog().list_available(SalesContext())

        assert [pm.technical_name for pm in available] == ["payment_first", "payment_alpha", "payment_zeta"]

    def test_excludes_inactive_methods(self):
        register_payment_method("payment_invoice")
        register_payment_method("payment_prepaid", active=False)

        available = PaymentMethodCatalog().list_available(SalesContext())

        assert [pm.technical_name for pm in available] == ["payment_invoice"]

    def test_filters_by_sales_channel_and_currency(self):
        register_payment_method("payment_invoice")
        register_payment_method("payment_cash", sales_channel_ids=["pos"])
        register_payment_method("payment_ach", currencies=["USD"])

        web_eur = PaymentMethodCatalog().list_available(SalesContext(sales_channel_id="web", currency="EUR"))
        pos_usd = PaymentMethodCatalog().list_available(SalesContext(sales_channel_id="pos", currency="USD"))

        assert [pm.technical_name for pm in web_eur] == ["payment_invoice"]
        assert {pm.technical_name for pm in pos_usd} == {"payment_invoice", "payment_cash", "payment_ach"}

    def test_is_available(self):
        pm_id = register_payment_method("payment_invoice", currencies=["EUR"])
        catalog = PaymentMethodCatalog()

        assert catalog.is_available(pm_id, SalesContext(currency="EUR"))
        assert not catalog.is_available(pm_id, SalesContext(currency="USD"))
        assert not catalog.is_available("missing", SalesContext())
        assert not catalog.is_available("", SalesContext())
