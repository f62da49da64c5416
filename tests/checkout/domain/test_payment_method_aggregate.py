"""Tests for the PaymentMethod aggregate."""

import pytest
from checkout.payment_method.events import (
    PaymentMethodActivated,
    PaymentMethodDeactivated,
    PaymentMethodRegistered,
)
from checkout.payment_method.payment_method import PaymentMethod
from checkout.shared.context import SalesContext
from protean.exceptions import ValidationError


def _register(**overrides):
    data = {"name": "Invoice", "technical_name": "payment_invoice"}
    data.update(overrides)
    return PaymentMethod.register(**data)


class TestRegister:
    def test_defaults(self):
        pm = _register()
        assert pm.active is True
        assert pm.position == 1
        assert pm.assigned_sales_channels == []
        assert pm.allowed_currencies == []

    def test_assignments_are_normalized(self):
        pm = _register(sales_channel_ids=["web", "app", "web"], currencies=["USD", "EUR"])
        assert pm.assigned_sales_channels == ["app", "web"]
        assert pm.allowed_currencies == ["EUR", "USD"]

    def test_raises_registered_event(self):
        pm = _register()
        assert len(pm._events) == 1
        event = pm._events[0]
        assert isinstance(event, PaymentMethodRegistered)
        assert event.payment_method_id == pm.id
        assert event.technical_name == "payment_invoice"

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            PaymentMethod.register(name=None, technical_name="payment_x")


class TestAvailability:
    def test_unrestricted_method_is_available_everywhere(self):
        pm = _register()
        assert pm.is_available_in(SalesContext(sales_channel_id="web", currency="USD"))

    def test_inactive_method_is_unavailable(self):
        pm = _register(active=False)
        assert not pm.is_available_in(SalesContext())

    def test_sales_channel_restriction(self):
        pm = _register(sales_channel_ids=["web"])
        assert pm.is_available_in(SalesContext(sales_channel_id="web"))
        assert not pm.is_available_in(SalesContext(sales_channel_id="pos"))

    def test_currency_restriction(self):
        pm = _register(currencies=["EUR"])
        assert pm.is_available_in(SalesContext(currency="EUR"))
        assert not pm.is_available_in(SalesContext(currency="GBP"))


class TestActivation:
    def test_deactivate(self):
        pm = _register()
        pm._events.clear()
        pm.deactivate()
        assert pm.active is False
        assert isinstance(pm._events[0], PaymentMethodDeactivated)

    def test_activate(self):
        pm = _register(active=False)
        pm._events.clear()
        pm.activate()
        assert pm.active is True
        assert isinstance(pm._events[0], PaymentMethodActivated)

    def test_cannot_deactivate_twice(self):
        pm = _register(active=False)
        with pytest.raises(ValidationError):
            pm.deactivate()

    def test_cannot_activate_active_method(self):
        pm = _register()
        with pytest.raises(ValidationError):
            pm.activate()
