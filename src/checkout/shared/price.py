"""CalculatedPrice value object: a price together with its tax breakdown."""

import json

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text

from checkout.domain import checkout


@checkout.value_object
class CalculatedPrice:
    """A computed price: unit and total amounts plus the taxes that produced them.

    ``calculated_taxes`` is a JSON list of ``{"tax", "tax_rate", "price"}``
    objects and ``tax_rules`` a JSON list of ``{"tax_rate", "percentage"}``
    objects. Prices are captured once and never recomputed.
    """

    unit_price = Float(required=True)
    total_price = Float(required=True)
    quantity = Integer(default=1, min_value=1)
    calculated_taxes = Text(default="[]")
    tax_rules = Text(default="[]")
    currency = String(max_length=3, default="EUR")

    @invariant.post
    def tax_breakdown_must_be_json_lists(self):
        for field_name in ("calculated_taxes", "tax_rules"):
            raw = getattr(self, field_name)
            if not raw:
                continue
            try:
                parsed = json.loads(raw)
            except (json.JSONDecodeError, TypeError):
                raise ValidationError({field_name: ["Must be valid JSON"]}) from None
            if not isinstance(parsed, list):
                raise ValidationError({field_name: ["Must be a JSON list"]})

    @property
    def tax_total(self) -> float:
        """Sum of all calculated taxes."""
        return sum(float(tax.get("tax", 0.0)) for tax in self.taxes)

    @property
    def net_price(self) -> float:
        return self.total_price - self.tax_total

    @property
    def taxes(self) -> list[dict]:
        return json.loads(self.calculated_taxes) if self.calculated_taxes else []

    @property
    def rules(self) -> list[dict]:
        return json.loads(self.tax_rules) if self.tax_rules else []

    def as_total(self) -> "CalculatedPrice":
        """Return a single-quantity copy whose unit price is this price's total.

        A payment transaction is charged the order total, so both its unit and
        total price are the order's total price.
        """
        return CalculatedPrice(
            unit_price=self.total_price,
            total_price=self.total_price,
            quantity=1,
            calculated_taxes=self.calculated_taxes,
            tax_rules=self.tax_rules,
            currency=self.currency,
        )

    @classmethod
    def build(cls, total_price, calculated_taxes=None, tax_rules=None, currency="EUR"):
        """Build a price for a single unit from plain Python tax structures."""
        return cls(
            unit_price=total_price,
            total_price=total_price,
            quantity=1,
            calculated_taxes=json.dumps(calculated_taxes or []),
            tax_rules=json.dumps(tax_rules or []),
            currency=currency,
        )
