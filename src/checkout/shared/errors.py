"""Caller input errors raised by the checkout workflows."""

from protean.exceptions import ObjectNotFoundError, ValidationError


class OrderNotFound(ObjectNotFoundError):
    """No order with the given id belongs to the calling customer."""

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


class UnknownPaymentMethod(ValidationError):
    """The requested payment method is not offered to the order's sales context."""

    def __init__(self, payment_method_id):
        self.payment_method_id = payment_method_id
        super().__init__({"payment_method_id": [f"The payment method {payment_method_id} could not be found"]})
