"""Faker-based data generators for Locust load test scenarios.

Payloads match the camelCase field names of the Checkout API's Pydantic
request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

TAX_RATES = (7.0, 19.0)


def customer_id() -> str:
    return str(uuid.uuid4())


def payment_method_data(position: int = 1) -> dict:
    """Generate a RegisterPaymentMethodRequest payload."""
    word = fake.unique.word()
    return {
        "name": f"{word.capitalize()} Pay",
        "technicalName": f"payment_{word}_{uuid.uuid4().hex[:6]}",
        "description": fake.sentence()[:255],
        "position": position,
        "active": True,
    }


def order_data(payment_method_id: str) -> dict:
    """Generate a PlaceOrderRequest payload with a consistent tax breakdown."""
    total = round(random.uniform(9.99, 499.99), 2)
    rate = random.choice(TAX_RATES)
    tax = round(total - total / (1 + rate / 100), 2)
    return {
        "paymentMethodId": payment_method_id,
        "totalPrice": total,
        "calculatedTaxes": [{"tax": tax, "taxRate": rate, "price": total}],
        "taxRules": [{"taxRate": rate, "percentage": 100.0}],
    }


def customer_headers(cust_id: str, sales_channel_id: str = "storefront", currency: str = "EUR") -> dict:
    return {
        "sw-customer-id": cust_id,
        "sw-sales-channel-id": sales_channel_id,
        "sw-currency": currency,
    }
