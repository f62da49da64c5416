"""Payment method management: commands and handler."""

import json

from protean import handle
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.payment_method.payment_method import PaymentMethod


@checkout.command(part_of="PaymentMethod")
class RegisterPaymentMethod:
    name = String(required=True, max_length=255)
    technical_name = String(required=True, max_length=100)
    description = String(max_length=1000)
    position = Integer(default=1)
    active = Boolean(default=True)
    sales_channel_ids = Text()  # JSON list
    currencies = Text()  # JSON list


@checkout.command(part_of="PaymentMethod")
class ActivatePaymentMethod:
    payment_method_id = Identifier(required=True)


@checkout.command(part_of="PaymentMethod")
class DeactivatePaymentMethod:
    payment_method_id = Identifier(required=True)


@checkout.command_handler(part_of=PaymentMethod)
class ManagePaymentMethodHandler:
    @handle(RegisterPaymentMethod)
    def register_payment_method(self, command):
        payment_method = PaymentMethod.register(
            name=command.name,
            technical_name=command.technical_name,
            description=command.description,
            position=command.position if command.position is not None else 1,
            active=command.active if command.active is not None else True,
            sales_channel_ids=json.loads(command.sales_channel_ids) if command.sales_channel_ids else None,
            currencies=json.loads(command.currencies) if command.currencies else None,
        )
        current_domain.repository_for(PaymentMethod).add(payment_method)
        return str(payment_method.id)

    @handle(ActivatePaymentMethod)
    def activate_payment_method(self, command):
        repo = current_domain.repository_for(PaymentMethod)
        payment_method = repo.get(command.payment_method_id)
        payment_method.activate()
        repo.add(payment_method)

    @handle(DeactivatePaymentMethod)
    def deactivate_payment_method(self, command):
        repo = current_domain.repository_for(PaymentMethod)
        payment_method = repo.get(command.payment_method_id)
        payment_method.deactivate()
        repo.add(payment_method)
