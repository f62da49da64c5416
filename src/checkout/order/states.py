"""The ``order_transaction.state`` machine: states, actions and allowed transitions.

State Machine:
    OPEN → IN_PROGRESS / AUTHORIZED / REMINDED → PAID / PAID_PARTIALLY
    PAID → REFUNDED / REFUNDED_PARTIALLY / CHARGEBACK
    Any non-terminal state → CANCELLED (via ``cancel``)
    CANCELLED and REFUNDED are terminal.
"""

from enum import Enum

ORDER_TRANSACTION_STATE_MACHINE = "order_transaction.state"


class TransactionState(Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    AUTHORIZED = "authorized"
    REMINDED = "reminded"
    PAID = "paid"
    PAID_PARTIALLY = "paid_partially"
    FAILED = "failed"
    CHARGEBACK = "chargeback"
    REFUNDED = "refunded"
    REFUNDED_PARTIALLY = "refunded_partially"
    CANCELLED = "cancelled"


class TransitionAction(Enum):
    DO_PAY = "do_pay"
    PROCESS = "process"
    AUTHORIZE = "authorize"
    REMIND = "remind"
    PAID = "paid"
    PAID_PARTIALLY = "paid_partially"
    FAIL = "fail"
    CHARGEBACK = "chargeback"
    REFUND = "refund"
    REFUND_PARTIALLY = "refund_partially"
    REOPEN = "reopen"
    CANCEL = "cancel"


INITIAL_STATE = TransactionState.OPEN

_S = TransactionState
_A = TransitionAction

# (current state) → {action: target state}
TRANSITIONS = {
    _S.OPEN: {
        _A.DO_PAY: _S.IN_PROGRESS,
        _A.PROCESS: _S.IN_PROGRESS,
        _A.AUTHORIZE: _S.AUTHORIZED,
        _A.REMIND: _S.REMINDED,
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.FAIL: _S.FAILED,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.IN_PROGRESS: {
        _A.AUTHORIZE: _S.AUTHORIZED,
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.FAIL: _S.FAILED,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.AUTHORIZED: {
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.FAIL: _S.FAILED,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.REMINDED: {
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.PAID_PARTIALLY: {
        _A.PAID: _S.PAID,
        _A.REMIND: _S.REMINDED,
        _A.REFUND: _S.REFUNDED,
        _A.REFUND_PARTIALLY: _S.REFUNDED_PARTIALLY,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.PAID: {
        _A.REFUND: _S.REFUNDED,
        _A.REFUND_PARTIALLY: _S.REFUNDED_PARTIALLY,
        _A.CHARGEBACK: _S.CHARGEBACK,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.FAILED: {
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.CHARGEBACK: {
        _A.PAID: _S.PAID,
        _A.PAID_PARTIALLY: _S.PAID_PARTIALLY,
        _A.REOPEN: _S.OPEN,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.REFUNDED_PARTIALLY: {
        _A.REFUND: _S.REFUNDED,
        _A.CANCEL: _S.CANCELLED,
    },
    _S.REFUNDED: {},  # Terminal
    _S.CANCELLED: {},  # Terminal
}

TERMINAL_STATES = frozenset(state for state, actions in TRANSITIONS.items() if not actions)


def target_state(current: TransactionState, action: TransitionAction) -> TransactionState | None:
    """Return the state ``action`` leads to from ``current``, or None if not allowed."""
    return TRANSITIONS.get(current, {}).get(action)
