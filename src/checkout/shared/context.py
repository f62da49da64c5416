"""Sales context: the shop, currency and customer a request is evaluated against."""

from dataclasses import dataclass

DEFAULT_SALES_CHANNEL = "storefront"
DEFAULT_CURRENCY = "EUR"
DEFAULT_CUSTOMER_GROUP = "default"


@dataclass(frozen=True)
class SalesContext:
    """Decides which payment methods are offered to a caller."""

    sales_channel_id: str = DEFAULT_SALES_CHANNEL
    currency: str = DEFAULT_CURRENCY
    customer_id: str | None = None
    customer_group_id: str = DEFAULT_CUSTOMER_GROUP

    @classmethod
    def for_order(cls, order, customer_group_id: str = DEFAULT_CUSTOMER_GROUP) -> "SalesContext":
        """Assemble the context an order was placed in.

        Availability of payment methods for an existing order is judged by the
        order's own sales channel and currency, not by the caller's session.
        """
        return cls(
            sales_channel_id=order.sales_channel_id or DEFAULT_SALES_CHANNEL,
            currency=order.currency or DEFAULT_CURRENCY,
            customer_id=str(order.customer_id),
            customer_group_id=customer_group_id,
        )
