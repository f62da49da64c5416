"""Tests for the order_transaction.state transition table."""

import pytest
from checkout.order.states import (
    INITIAL_STATE,
    TERMINAL_STATES,
    TRANSITIONS,
    TransactionState,
    TransitionAction,
    target_state,
)


class TestTransitionTable:
    def test_initial_state_is_open(self):
        assert INITIAL_STATE == TransactionState.OPEN

    def test_every_state_has_an_entry(self):
        assert set(TRANSITIONS) == set(TransactionState)

    def test_terminal_states(self):
        assert TERMINAL_STATES == {TransactionState.CANCELLED, TransactionState.REFUNDED}

    @pytest.mark.parametrize(
        "state",
        [s for s in TransactionState if s not in (TransactionState.CANCELLED, TransactionState.REFUNDED)],
    )
    def test_cancel_allowed_from_every_non_terminal_state(self, state):
        assert target_state(state, TransitionAction.CANCEL) == TransactionState.CANCELLED

    def test_cancel_not_allowed_from_cancelled(self):
        assert target_state(TransactionState.CANCELLED, TransitionAction.CANCEL) is None

    def test_pay_from_open(self):
        assert target_state(TransactionState.OPEN, TransitionAction.PAID) == TransactionState.PAID

    def test_refund_requires_payment(self):
        assert target_state(TransactionState.OPEN, TransitionAction.REFUND) is None
        assert target_state(TransactionState.PAID, TransitionAction.REFUND) == TransactionState.REFUNDED

    def test_reopen_returns_to_open(self):
        assert target_state(TransactionState.FAILED, TransitionAction.REOPEN) == TransactionState.OPEN
