"""Transition engine factory.

Provides get_transition_engine() / set_transition_engine() to swap
implementations. Defaults to OrderTransactionStateMachine.
"""

from checkout.state_machine.order_transaction import OrderTransactionStateMachine
from checkout.state_machine.port import TransitionEngine

_current_engine: TransitionEngine | None = None


def get_transition_engine() -> TransitionEngine:
    """Return the current transition engine. Defaults to OrderTransactionStateMachine."""
    global _current_engine
    if _current_engine is None:
        _current_engine = OrderTransactionStateMachine()
    return _current_engine


def set_transition_engine(engine: TransitionEngine) -> None:
    """Override the active transition engine (useful for tests)."""
    global _current_engine
    _current_engine = engine


def reset_transition_engine() -> None:
    """Reset to the default engine."""
    global _current_engine
    _current_engine = None
