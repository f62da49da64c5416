"""Pydantic request/response schemas for the Store and Admin APIs.

These are external contracts (anti-corruption layer), separate from
internal Protean commands. Field names follow the store API's camelCase
wire format; Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict, Field

_CAMEL = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CalculatedTaxSchema(BaseModel):
    model_config = _CAMEL

    tax: float
    tax_rate: float = Field(alias="taxRate", ge=0)
    price: float


class TaxRuleSchema(BaseModel):
    model_config = _CAMEL

    tax_rate: float = Field(alias="taxRate", ge=0)
    percentage: float = Field(default=100.0, ge=0, le=100)


# ---------------------------------------------------------------------------
# Store API Request Schemas
# ---------------------------------------------------------------------------
class SetPaymentOrderRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "orderId": "0b6b2b6b-3a1f-4f39-9b1a-5f0f0f0f0f0f",
                    "paymentMethodId": "7d0e2a3c-6f7a-4c49-8f6e-1a2b3c4d5e6f",
                }
            ]
        },
    )

    order_id: str = Field(alias="orderId", min_length=1)
    payment_method_id: str = Field(alias="paymentMethodId", min_length=1)


class PlaceOrderRequest(BaseModel):
    model_config = _CAMEL

    payment_method_id: str = Field(alias="paymentMethodId", min_length=1)
    total_price: float = Field(alias="totalPrice", ge=0)
    calculated_taxes: list[CalculatedTaxSchema] = Field(default_factory=list, alias="calculatedTaxes")
    tax_rules: list[TaxRuleSchema] = Field(default_factory=list, alias="taxRules")


# ---------------------------------------------------------------------------
# Admin API Request Schemas
# ---------------------------------------------------------------------------
class RegisterPaymentMethodRequest(BaseModel):
    model_config = _CAMEL

    name: str = Field(min_length=1)
    technical_name: str = Field(alias="technicalName", min_length=1)
    description: str | None = None
    position: int = 1
    active: bool = True
    sales_channel_ids: list[str] = Field(default_factory=list, alias="salesChannelIds")
    currencies: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class SuccessResponse(BaseModel):
    success: bool = True


class StatusResponse(BaseModel):
    status: str = "ok"


class OrderIdResponse(BaseModel):
    model_config = _CAMEL

    order_id: str = Field(alias="orderId")


class PaymentMethodIdResponse(BaseModel):
    model_config = _CAMEL

    payment_method_id: str = Field(alias="paymentMethodId")


class PaymentMethodSchema(BaseModel):
    model_config = _CAMEL

    id: str
    name: str
    technical_name: str = Field(alias="technicalName")
    description: str | None = None
    position: int


class PaymentMethodListResponse(BaseModel):
    total: int
    elements: list[PaymentMethodSchema]


class TransactionSchema(BaseModel):
    model_config = _CAMEL

    id: str
    payment_method_id: str = Field(alias="paymentMethodId")
    state: str | None = None
    amount: float
    position: int


class OrderResponse(BaseModel):
    model_config = _CAMEL

    id: str
    order_number: str = Field(alias="orderNumber")
    sales_channel_id: str = Field(alias="salesChannelId")
    currency: str
    total_price: float = Field(alias="totalPrice")
    transactions: list[TransactionSchema]
