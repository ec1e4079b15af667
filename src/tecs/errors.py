"""Exception hierarchy for tecs.

Absent components are never errors: lookups return ``None``/``False``. The
exceptions here cover operations that cannot proceed without corrupting
registry state, or misuse of the query and borrow rules.
"""

from __future__ import annotations

from typing import Any


class TecsError(Exception):
    """Base class for all tecs errors."""

    pass


class UnknownEntityError(TecsError, KeyError):
    """Raised when an operation targets an entity that is not alive.

    The entity was either never allocated or has already been removed.

    Attributes:
        entity: The offending entity id.
        operation: Name of the operation that was attempted, if known.
    """

    def __init__(self, entity: Any, operation: str | None = None) -> None:
        self.entity = entity
        self.operation = operation
        message = f"Entity {entity} is not alive"
        if operation:
            message += f" (cannot {operation})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class RegistryCorruptedError(TecsError, RuntimeError):
    """Raised when registry and store bookkeeping disagree. Never recoverable."""

    pass


class BorrowError(TecsError, RuntimeError):
    """Raised when a query or mutation conflicts with an outstanding borrow."""

    pass


class QueryError(TecsError, ValueError):
    """Raised for malformed queries: empty, duplicated types, or too many types."""

    pass


class BuilderError(TecsError, RuntimeError):
    """Raised when an EntityBuilder is reused after build()."""

    pass


class SystemExecutionError(TecsError, RuntimeError):
    """Raised when a scheduled system fails. The original error is chained.

    Attributes:
        system_name: Name of the failing system.
    """

    def __init__(self, system_name: str, message: str | None = None) -> None:
        self.system_name = system_name
        super().__init__(message or f"System '{system_name}' failed")
