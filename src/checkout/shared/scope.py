"""Execution scopes for persistence writes.

A caller may be entitled to *request* a change to an order while the write
itself is performed with system rights. The scope is passed explicitly to
every write operation; nothing in the process holds ambient privileges.
"""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import InvalidOperationError


class Scope(Enum):
    USER = "user"
    SYSTEM = "system"


@dataclass(frozen=True)
class ExecutionScope:
    """Capability token naming who performs a write and with which rights."""

    scope: Scope
    actor_id: str | None = None

    @classmethod
    def user(cls, customer_id: str) -> "ExecutionScope":
        return cls(scope=Scope.USER, actor_id=str(customer_id))

    @classmethod
    def system(cls, on_behalf_of: str | None = None) -> "ExecutionScope":
        """Elevated scope for internal writes, optionally recording the requesting actor."""
        return cls(scope=Scope.SYSTEM, actor_id=str(on_behalf_of) if on_behalf_of else None)

    @property
    def is_system(self) -> bool:
        return self.scope == Scope.SYSTEM


def require_system_scope(scope: ExecutionScope | None, operation: str) -> None:
    """Raise unless ``scope`` grants system rights."""
    if scope is None or not scope.is_system:
        raise InvalidOperationError(f"{operation} requires system scope")
