"""Query execution: intersecting component stores.

The engine drives iteration from the smallest requested store and probes the
others by entity id, so the work done is proportional to the smallest
candidate set rather than to the number of entities.

Usage:
    for entity, pos, vel in registry.query(Position, Read(Velocity)):
        pos.x += vel.dx
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, cast

from tecs.core.query.models import Query
from tecs.core.types import EntityId
from tecs.storage.borrow import BorrowKind

if TYPE_CHECKING:
    from tecs.world.registry import Registry

logger = logging.getLogger(__name__)


def _describe(query: Query) -> str:
    names = ", ".join(t.__name__ for t in query.types())
    return f"query({names})"


def iter_rows(registry: Registry, query: Query) -> Iterator[tuple[Any, ...]]:
    """Yield ``(entity, c1, ..., cN)`` for every entity matching the query.

    Components are the live stored objects, in the query's position order.
    The registry is borrowed from the first row request until the generator
    is exhausted or closed.

    Args:
        registry: Registry to read from.
        query: Validated query.

    Yields:
        One row per matching entity, in the driving store's dense order.

    Raises:
        BorrowError: If the borrow conflicts with another live query.
    """
    stores = []
    for component_type in query.types():
        store = registry._store(component_type)
        if store is None:
            # Type never attached to anything
            return
        stores.append(store)

    excluded = [
        store
        for store in (registry._store(t) for t in query.excluded)
        if store is not None and len(store)
    ]
    driver = min(stores, key=len)
    others = [store for store in stores if store is not driver]
    kind = BorrowKind.SHARED if query.is_read_only() else BorrowKind.EXCLUSIVE

    logger.debug(
        "%s driven by %s (%d candidates)",
        _describe(query),
        driver.component_type.__name__,
        len(driver),
    )
    with registry._borrows.borrow(kind, _describe(query)):
        for entity in driver.entities():
            if not all(entity in store for store in others):
                continue
            if any(entity in store for store in excluded):
                continue
            yield (entity, *(store.get_mut(entity) for store in stores))


class QueryResult[R: tuple[Any, ...]]:
    """Lazy query result.

    Nothing is evaluated until iteration starts, and every iteration runs the
    query afresh against the registry's current state.

    Args:
        registry: Registry to query.
        query: Validated query.
    """

    def __init__(self, registry: Registry, query: Query):
        self._registry = registry
        self._query = query

    @property
    def query(self) -> Query:
        """The validated query this result runs."""
        return self._query

    def __iter__(self) -> Iterator[R]:
        """Iterate rows of ``(entity, component1, component2, ...)``."""
        return cast(Iterator[R], iter_rows(self._registry, self._query))

    def components(self) -> Iterator[tuple[Any, ...]]:
        """Iterate rows without the leading entity id."""
        for _, *components in iter_rows(self._registry, self._query):
            yield tuple(components)

    def entities(self) -> Iterator[EntityId]:
        """Iterate just the matching entity ids."""
        for entity, *_ in iter_rows(self._registry, self._query):
            yield entity

    def count(self) -> int:
        """Count matching entities (runs the query, use sparingly)."""
        return sum(1 for _ in iter_rows(self._registry, self._query))

    def first(self) -> R | None:
        """Return the first row, or None if nothing matches."""
        rows = iter_rows(self._registry, self._query)
        try:
            return cast(R, next(rows, None))
        finally:
            rows.close()

    def __repr__(self) -> str:
        return f"QueryResult({_describe(self._query)})"


def run_query(registry: Registry, query: Query) -> QueryResult[tuple[Any, ...]]:
    """Run a prepared Query against a registry.

    Equivalent to ``registry.query(query)``.
    """
    return registry.query(query)
