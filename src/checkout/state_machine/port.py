"""Transition engine port (abstract interface).

Defines the contract for driving payment transactions through their state
machine. Callers only ever name an action; the engine decides the target
state and persists it.
"""

from abc import ABC, abstractmethod

from checkout.order.states import TransitionAction
from checkout.shared.scope import ExecutionScope


class TransitionEngine(ABC):
    """Abstract transition engine interface."""

    @abstractmethod
    def initial_state(self, machine_name: str) -> str:
        """Return the technical name of the initial state of ``machine_name``."""
        ...

    @abstractmethod
    def transition(
        self,
        transaction_id: str,
        action: TransitionAction,
        scope: ExecutionScope,
    ) -> str:
        """Apply ``action`` to a transaction and return the technical name of its new state."""
        ...
