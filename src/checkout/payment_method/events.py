"""Domain events for the PaymentMethod aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from checkout.domain import checkout


@checkout.event(part_of="PaymentMethod")
class PaymentMethodRegistered:
    __version__ = 1

    payment_method_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    technical_name = String(required=True, max_length=100)
    active = Boolean(default=True)
    registered_at = DateTime(required=True)


@checkout.event(part_of="PaymentMethod")
class PaymentMethodActivated:
    __version__ = 1

    payment_method_id = Identifier(required=True)
    activated_at = DateTime(required=True)


@checkout.event(part_of="PaymentMethod")
class PaymentMethodDeactivated:
    __version__ = 1

    payment_method_id = Identifier(required=True)
    deactivated_at = DateTime(required=True)
