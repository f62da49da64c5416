"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class CheckoutState:
    """Tracks a simulated customer switching the payment method of an order."""

    customer_id: str | None = None
    order_id: str | None = None
    payment_method_ids: list[str] = field(default_factory=list)
    current_payment_method_id: str | None = None
    switches: int = 0
