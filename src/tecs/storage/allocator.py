"""Entity allocation service.

EntityAllocator is a stateful service that manages the entity id lifecycle.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterator

from tecs.core.types import EntityId
from tecs.errors import UnknownEntityError


class EntityAllocator:
    """Allocates entity ids and tracks which ones are alive.

    With reuse enabled, freed ids go to a min-heap and the smallest freed id
    is handed out before any fresh one. With reuse disabled, ids strictly
    increase for the allocator's whole lifetime.

    Args:
        first_id: First fresh id to hand out.
        reuse_ids: Whether freed ids may be handed out again.
    """

    def __init__(self, first_id: int = 0, reuse_ids: bool = True):
        self._next_id = first_id
        self._reuse_ids = reuse_ids
        self._free: list[EntityId] = []
        self._alive: set[EntityId] = set()

    @property
    def reuse_ids(self) -> bool:
        """Whether freed ids go back into the pool."""
        return self._reuse_ids

    def allocate(self) -> EntityId:
        """Allocate an entity id, reusing the smallest freed id when allowed.

        Returns:
            Newly allocated, now alive, EntityId.
        """
        if self._free:
            entity = heapq.heappop(self._free)
        else:
            entity = self._next_id
            self._next_id += 1
        self._alive.add(entity)
        return entity

    def deallocate(self, entity: EntityId) -> None:
        """Mark an entity dead and return its id to the free pool.

        Args:
            entity: Entity id to deallocate.

        Raises:
            UnknownEntityError: If the entity is not alive.
        """
        if entity not in self._alive:
            raise UnknownEntityError(entity, "deallocate")
        self._alive.remove(entity)
        if self._reuse_ids:
            heapq.heappush(self._free, entity)

    def is_alive(self, entity: EntityId) -> bool:
        """Check if an entity id is currently allocated."""
        return entity in self._alive

    @property
    def free_count(self) -> int:
        """Number of freed ids waiting to be reused."""
        return len(self._free)

    def __len__(self) -> int:
        return len(self._alive)

    def __iter__(self) -> Iterator[EntityId]:
        """Iterate alive ids in ascending order (snapshot)."""
        return iter(sorted(self._alive))
