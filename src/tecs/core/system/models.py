"""System models: descriptors binding a query to a row function."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tecs.core.query.models import Query

if TYPE_CHECKING:
    from tecs.world.registry import Registry


@dataclass(frozen=True)
class SystemDescriptor:
    """Metadata about a system: its name, query, and row function."""

    name: str
    run: Callable[..., Any]
    query: Query
    with_entity: bool = False  # If True, run receives the entity id first

    def readable_types(self) -> frozenset[type]:
        """Component types the system sees. Write access implies read."""
        return frozenset(self.query.types())

    def writable_types(self) -> frozenset[type]:
        """Component types the system may mutate."""
        return self.query.writes()

    def __call__(self, registry: Registry) -> int:
        """Run the system once over every row of its query.

        Returns:
            Number of rows processed.
        """
        processed = 0
        rows = iter(registry.query(self.query))
        try:
            for entity, *components in rows:
                if self.with_entity:
                    self.run(entity, *components)
                else:
                    self.run(*components)
                processed += 1
        finally:
            # Release the borrow even when run raises
            rows.close()
        return processed
