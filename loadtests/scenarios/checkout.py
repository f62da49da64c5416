"""Checkout load test scenarios.

One stateful SequentialTaskSet journey: a customer places an order, then
switches its payment method back and forth, including an idempotent repeat.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import customer_headers, customer_id, order_data, payment_method_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CheckoutState

PAYMENT_METHODS_PER_USER = 3


class PaymentSwitchJourney(SequentialTaskSet):
    """Register methods -> Place Order -> Switch Payment (x2) -> Repeat last switch."""

    def on_start(self):
        self.state = CheckoutState(customer_id=customer_id())

    def _headers(self):
        return customer_headers(self.state.customer_id)

    @task
    def register_payment_methods(self):
        for position in range(1, PAYMENT_METHODS_PER_USER + 1):
            with self.client.post(
                "/api/payment-method",
                json=payment_method_data(position),
                catch_response=True,
                name="POST /api/payment-method",
            ) as resp:
                if resp.status_code == 201:
                    self.state.payment_method_ids.append(resp.json()["paymentMethodId"])
                else:
                    resp.failure(f"Register payment method failed: {resp.status_code} - {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def place_order(self):
        method_id = self.state.payment_method_ids[0]
        with self.client.post(
            "/store-api/checkout/order",
            json=order_data(method_id),
            headers=self._headers(),
            catch_response=True,
            name="POST /store-api/checkout/order",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["orderId"]
                self.state.current_payment_method_id = method_id
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    def _switch_to(self, method_id, name):
        with self.client.post(
            "/store-api/order/payment",
            json={"orderId": self.state.order_id, "paymentMethodId": method_id},
            headers=self._headers(),
            catch_response=True,
            name=name,
        ) as resp:
            if resp.status_code == 200:
                self.state.current_payment_method_id = method_id
                self.state.switches += 1
            else:
                resp.failure(f"Set payment failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def switch_payment_method(self):
        others = [m for m in self.state.payment_method_ids if m != self.state.current_payment_method_id]
        self._switch_to(random.choice(others), "POST /store-api/order/payment (switch)")

    @task
    def switch_again(self):
        others = [m for m in self.state.payment_method_ids if m != self.state.current_payment_method_id]
        self._switch_to(random.choice(others), "POST /store-api/order/payment (switch)")

    @task
    def repeat_switch(self):
        self._switch_to(self.state.current_payment_method_id, "POST /store-api/order/payment (no-op)")

    @task
    def view_order(self):
        with self.client.get(
            f"/store-api/order/{self.state.order_id}",
            headers=self._headers(),
            catch_response=True,
            name="GET /store-api/order/[id]",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CheckoutUser(HttpUser):
    wait_time = between(0.5, 2)
    tasks = [PaymentSwitchJourney]
