"""FastAPI routes for the Checkout domain: store API and payment method admin."""

import json

from fastapi import APIRouter, Depends, Header, HTTPException
from protean.utils.globals import current_domain

from checkout.api.schemas import (
    OrderIdResponse,
    OrderResponse,
    PaymentMethodIdResponse,
    PaymentMethodListResponse,
    PaymentMethodSchema,
    PlaceOrderRequest,
    RegisterPaymentMethodRequest,
    SetPaymentOrderRequest,
    StatusResponse,
    SuccessResponse,
    TransactionSchema,
)
from checkout.order.order import Order
from checkout.order.payment import SetOrderPayment
from checkout.order.placement import PlaceOrder
from checkout.payment_method.catalog import PaymentMethodCatalog
from checkout.payment_method.management import (
    ActivatePaymentMethod,
    DeactivatePaymentMethod,
    RegisterPaymentMethod,
)
from checkout.shared.context import (
    DEFAULT_CURRENCY,
    DEFAULT_CUSTOMER_GROUP,
    DEFAULT_SALES_CHANNEL,
    SalesContext,
)
from checkout.shared.errors import OrderNotFound
from checkout.utils.logging import add_context


# ---------------------------------------------------------------------------
# Caller identity
# ---------------------------------------------------------------------------
def sales_context(
    sw_customer_id: str = Header(default=""),
    sw_sales_channel_id: str = Header(default=DEFAULT_SALES_CHANNEL),
    sw_currency: str = Header(default=DEFAULT_CURRENCY),
    sw_customer_group_id: str = Header(default=DEFAULT_CUSTOMER_GROUP),
) -> SalesContext:
    """Sales context of the caller; the customer may be anonymous."""
    return SalesContext(
        sales_channel_id=sw_sales_channel_id,
        currency=sw_currency,
        customer_id=sw_customer_id or None,
        customer_group_id=sw_customer_group_id,
    )


def logged_in_context(context: SalesContext = Depends(sales_context)) -> SalesContext:
    """Sales context of a logged-in customer. Guest accounts count as logged in."""
    if not context.customer_id:
        raise HTTPException(
            status_code=403,
            detail={
                "code": "CHECKOUT__CUSTOMER_NOT_LOGGED_IN",
                "detail": "Customer is not logged in.",
            },
        )
    add_context(customer_id=context.customer_id, sales_channel_id=context.sales_channel_id)
    return context


# ---------------------------------------------------------------------------
# Store API Router
# ---------------------------------------------------------------------------
store_router = APIRouter(prefix="/store-api", tags=["store-api"])


@store_router.post("/order/payment", response_model=SuccessResponse)
async def set_order_payment(
    body: SetPaymentOrderRequest,
    context: SalesContext = Depends(logged_in_context),
) -> SuccessResponse:
    """Set the payment method of one of the caller's orders."""
    command = SetOrderPayment(
        order_id=body.order_id,
        customer_id=context.customer_id,
        payment_method_id=body.payment_method_id,
    )
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@store_router.get("/payment-method", response_model=PaymentMethodListResponse)
async def list_payment_methods(context: SalesContext = Depends(sales_context)) -> PaymentMethodListResponse:
    """Payment methods available in the caller's sales channel and currency."""
    available = PaymentMethodCatalog().list_available(context)
    return PaymentMethodListResponse(
        total=len(available),
        elements=[
            PaymentMethodSchema(
                id=str(pm.id),
                name=pm.name,
                technical_name=pm.technical_name,
                description=pm.description,
                position=pm.position or 0,
            )
            for pm in available
        ],
    )


@store_router.post("/checkout/order", status_code=201, response_model=OrderIdResponse)
async def place_order(
    body: PlaceOrderRequest,
    context: SalesContext = Depends(logged_in_context),
) -> OrderIdResponse:
    """Place an order for the caller with the chosen payment method."""
    command = PlaceOrder(
        customer_id=context.customer_id,
        payment_method_id=body.payment_method_id,
        total_price=body.total_price,
        calculated_taxes=json.dumps([tax.model_dump() for tax in body.calculated_taxes]),
        tax_rules=json.dumps([rule.model_dump() for rule in body.tax_rules]),
        sales_channel_id=context.sales_channel_id,
        currency=context.currency,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@store_router.get("/order/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    context: SalesContext = Depends(logged_in_context),
) -> OrderResponse:
    """One of the caller's orders with its transactions in creation order."""
    order = current_domain.repository_for(Order).find_for_customer(order_id, context.customer_id)
    if order is None:
        raise OrderNotFound(order_id)

    return OrderResponse(
        id=str(order.id),
        order_number=order.order_number,
        sales_channel_id=order.sales_channel_id,
        currency=order.currency,
        total_price=order.price.total_price,
        transactions=[
            TransactionSchema(
                id=str(t.id),
                payment_method_id=str(t.payment_method_id),
                state=t.status,
                amount=t.amount.total_price if t.amount else 0.0,
                position=t.position,
            )
            for t in order.transactions_in_creation_order()
        ],
    )


# ---------------------------------------------------------------------------
# Payment Method Admin Router
# ---------------------------------------------------------------------------
payment_method_router = APIRouter(prefix="/api/payment-method", tags=["payment-methods"])


@payment_method_router.post("", status_code=201, response_model=PaymentMethodIdResponse)
async def register_payment_method(body: RegisterPaymentMethodRequest) -> PaymentMethodIdResponse:
    command = RegisterPaymentMethod(
        name=body.name,
        technical_name=body.technical_name,
        description=body.description,
        position=body.position,
        active=body.active,
        sales_channel_ids=json.dumps(body.sales_channel_ids),
        currencies=json.dumps(body.currencies),
    )
    payment_method_id = current_domain.process(command, asynchronous=False)
    return PaymentMethodIdResponse(payment_method_id=payment_method_id)


@payment_method_router.post("/{payment_method_id}/activate", response_model=StatusResponse)
async def activate_payment_method(payment_method_id: str) -> StatusResponse:
    current_domain.process(ActivatePaymentMethod(payment_method_id=payment_method_id), asynchronous=False)
    return StatusResponse(status="activated")


@payment_method_router.post("/{payment_method_id}/deactivate", response_model=StatusResponse)
async def deactivate_payment_method(payment_method_id: str) -> StatusResponse:
    current_domain.process(DeactivatePaymentMethod(payment_method_id=payment_method_id), asynchronous=False)
    return StatusResponse(status="deactivated")
