"""Query models and access markers.

Usage:
    # Bare types are mutable positions
    Query(Position, Velocity)

    # Read-only positions allow several live queries at once
    Query(Position, Read(Velocity))

    # Exclusions
    Query(Position).excluding(Frozen)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from tecs.errors import QueryError


class Access(Enum):
    """Access level for a query position."""

    READ = auto()
    WRITE = auto()


@dataclass(frozen=True, slots=True)
class Read[T]:
    """Shared access to a component type in a query."""

    component_type: type[T]

    access = Access.READ


@dataclass(frozen=True, slots=True)
class Write[T]:
    """Mutable access to a component type in a query. Same as a bare type."""

    component_type: type[T]

    access = Access.WRITE


type Accessor[T] = type[T] | Read[T] | Write[T]
"""Anything that may stand in one query position."""


def _as_position(item: Any) -> Read[Any] | Write[Any]:
    if isinstance(item, Read | Write):
        if not isinstance(item.component_type, type):
            raise QueryError(f"Query position must wrap a class, got {item.component_type!r}")
        return item
    if isinstance(item, type):
        return Write(item)
    raise QueryError(f"Query positions must be classes, Read(...) or Write(...), got {item!r}")


@dataclass(frozen=True)
class Query:
    """Declarative query: required positions plus excluded types.

    Immutable - each method returns a new Query instance. Construction
    validates the positions, so an invalid Query never exists.

    Raises:
        QueryError: If no positions are given, a position is not a class, or a
            type is requested twice.
    """

    positions: tuple[Read[Any] | Write[Any], ...] = ()
    excluded: tuple[type, ...] = ()

    def __init__(self, *positions: Accessor[Any]):
        if not positions:
            raise QueryError("Query requires at least one component type")
        normalized = tuple(_as_position(p) for p in positions)
        seen: set[type] = set()
        for position in normalized:
            if position.component_type in seen:
                raise QueryError(
                    f"Component type {position.component_type.__name__} requested twice"
                )
            seen.add(position.component_type)
        object.__setattr__(self, "positions", normalized)
        object.__setattr__(self, "excluded", ())

    def having(self, *types: Accessor[Any]) -> Query:
        """Return a query that also requires these positions."""
        new = Query(*self.positions, *types)
        object.__setattr__(new, "excluded", self.excluded)
        new._check_exclusions()
        return new

    def excluding(self, *types: type) -> Query:
        """Return a query that skips entities holding any of these types."""
        for t in types:
            if not isinstance(t, type):
                raise QueryError(f"Excluded entries must be classes, got {t!r}")
        new = Query(*self.positions)
        object.__setattr__(new, "excluded", self.excluded + types)
        new._check_exclusions()
        return new

    def _check_exclusions(self) -> None:
        overlap = set(self.types()) & set(self.excluded)
        if overlap:
            names = ", ".join(sorted(t.__name__ for t in overlap))
            raise QueryError(f"Types both required and excluded: {names}")

    def types(self) -> tuple[type, ...]:
        """Required component types in position order."""
        return tuple(p.component_type for p in self.positions)

    def reads(self) -> frozenset[type]:
        """Types requested with Read access."""
        return frozenset(p.component_type for p in self.positions if p.access is Access.READ)

    def writes(self) -> frozenset[type]:
        """Types requested with Write access."""
        return frozenset(p.component_type for p in self.positions if p.access is Access.WRITE)

    def is_read_only(self) -> bool:
        """True if no position asks for mutable access."""
        return all(p.access is Access.READ for p in self.positions)

    @property
    def arity(self) -> int:
        """Number of required component types."""
        return len(self.positions)

    def __iter__(self) -> Iterator[type]:
        """Allow Query to be used where a tuple of types is expected."""
        return iter(self.types())

    def __contains__(self, item: type) -> bool:
        return item in self.types()

    def matches(self, has: frozenset[type]) -> bool:
        """Check if an entity holding exactly these types matches this query."""
        return all(t in has for t in self.types()) and all(t not in has for t in self.excluded)
