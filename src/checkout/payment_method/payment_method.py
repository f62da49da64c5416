"""PaymentMethod aggregate: a way of paying that can be offered to customers.

A payment method is offered to a sales context when it is active, assigned to
the context's sales channel and allows the context's currency. Empty
assignment lists mean "no restriction".
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String, Text

from checkout.domain import checkout
from checkout.payment_method.events import (
    PaymentMethodActivated,
    PaymentMethodDeactivated,
    PaymentMethodRegistered,
)


def _as_json_list(values):
    return json.dumps(sorted({str(v) for v in values or []}))


@checkout.aggregate
class PaymentMethod:
    name = String(required=True, max_length=255)
    technical_name = String(required=True, max_length=100, unique=True)
    description = String(max_length=1000)
    active = Boolean(default=True)
    position = Integer(default=1)
    sales_channel_ids = Text(default="[]")  # JSON list; empty = all channels
    currencies = Text(default="[]")  # JSON list; empty = all currencies
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def assignments_must_be_json_lists(self):
        for field_name in ("sales_channel_ids", "currencies"):
            raw = getattr(self, field_name)
            try:
                parsed = json.loads(raw) if raw else []
            except (json.JSONDecodeError, TypeError):
                raise ValidationError({field_name: ["Must be valid JSON"]}) from None
            if not isinstance(parsed, list):
                raise ValidationError({field_name: ["Must be a JSON list"]})

    @classmethod
    def register(
        cls,
        name,
        technical_name,
        description=None,
        position=1,
        active=True,
        sales_channel_ids=None,
        currencies=None,
    ):
        now = datetime.now(UTC)
        payment_method = cls(
            name=name,
            technical_name=technical_name,
            description=description,
            position=position,
            active=active,
            sales_channel_ids=_as_json_list(sales_channel_ids),
            currencies=_as_json_list(currencies),
            created_at=now,
            updated_at=now,
        )
        payment_method.raise_(
            PaymentMethodRegistered(
                payment_method_id=str(payment_method.id),
                name=name,
                technical_name=technical_name,
                active=active,
                registered_at=now,
            )
        )
        return payment_method

    @property
    def assigned_sales_channels(self) -> list[str]:
        return json.loads(self.sales_channel_ids) if self.sales_channel_ids else []

    @property
    def allowed_currencies(self) -> list[str]:
        return json.loads(self.currencies) if self.currencies else []

    def is_available_in(self, context) -> bool:
        """Whether this method may be offered to the given SalesContext."""
        if not self.active:
            return False

        channels = self.assigned_sales_channels
        if channels and context.sales_channel_id not in channels:
            return False

        currencies = self.allowed_currencies
        if currencies and context.currency not in currencies:
            return False

        return True

    def activate(self):
        if self.active:
            raise ValidationError({"active": ["Payment method is already active"]})
        now = datetime.now(UTC)
        self.active = True
        self.updated_at = now
        self.raise_(PaymentMethodActivated(payment_method_id=str(self.id), activated_at=now))

    def deactivate(self):
        if not self.active:
            raise ValidationError({"active": ["Payment method is already inactive"]})
        now = datetime.now(UTC)
        self.active = False
        self.updated_at = now
        self.raise_(PaymentMethodDeactivated(payment_method_id=str(self.id), deactivated_at=now))
