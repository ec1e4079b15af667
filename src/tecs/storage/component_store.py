"""Dense per-type component storage.

ComponentStore keeps all values of one component type in a contiguous list,
plus the mappings needed to find an entity's slot and the slot's owner:

    _dense[slot]    = component value
    _entities[slot] = owning entity
    _slots[entity]  = slot

Removal is a swap-remove: the last slot is moved into the hole and the list is
truncated. That keeps removal O(1) but reorders the store, so slot numbers and
iteration order are only valid until the next removal.

Usage:
    store = ComponentStore(Position)
    store.insert(entity, Position(0, 0))
    for entity, pos in store:
        ...
"""

from __future__ import annotations

from collections.abc import Iterator

from tecs.core.types import EntityId


class ComponentStore[T]:
    """Contiguous, hole-free storage of one component type.

    All operations are total: a missing entity yields None/False, never an error.
    The store does not know which entities are alive; the Registry is its only
    writer and keeps membership consistent.

    Args:
        component_type: The component class held by this store.
    """

    __slots__ = ("component_type", "_dense", "_entities", "_slots")

    def __init__(self, component_type: type[T]) -> None:
        self.component_type = component_type
        self._dense: list[T] = []
        self._entities: list[EntityId] = []
        self._slots: dict[EntityId, int] = {}

    def insert(self, entity: EntityId, value: T) -> T | None:
        """Add or replace the component for an entity.

        Replacing keeps the entity's slot (no structural change).

        Args:
            entity: Owning entity.
            value: Component value.

        Returns:
            The previous value if the entity already had one, else None.
        """
        slot = self._slots.get(entity)
        if slot is not None:
            previous = self._dense[slot]
            self._dense[slot] = value
            return previous

        self._slots[entity] = len(self._dense)
        self._dense.append(value)
        self._entities.append(entity)
        return None

    def remove(self, entity: EntityId) -> T | None:
        """Swap-remove the component for an entity.

        The last slot moves into the removed slot, so the entity that owned the
        last slot changes position.

        Args:
            entity: Entity whose component to remove.

        Returns:
            The removed value, or None if the entity had no component here.
        """
        slot = self._slots.pop(entity, None)
        if slot is None:
            return None

        value = self._dense[slot]
        last = len(self._dense) - 1
        if slot != last:
            moved = self._entities[last]
            self._dense[slot] = self._dense[last]
            self._entities[slot] = moved
            self._slots[moved] = slot
        self._dense.pop()
        self._entities.pop()
        return value

    def get(self, entity: EntityId) -> T | None:
        """Get the component for an entity, or None."""
        slot = self._slots.get(entity)
        if slot is None:
            return None
        return self._dense[slot]

    def get_mut(self, entity: EntityId) -> T | None:
        """Get the live stored component for in-place mutation, or None.

        Changes to the returned object are visible to every later lookup and
        query; there is no copy in between.
        """
        slot = self._slots.get(entity)
        if slot is None:
            return None
        return self._dense[slot]

    def contains(self, entity: EntityId) -> bool:
        """Check if an entity has a component in this store."""
        return entity in self._slots

    def slot_of(self, entity: EntityId) -> int | None:
        """Current dense slot of an entity's component.

        Invalidated by any removal from this store.
        """
        return self._slots.get(entity)

    def entities(self) -> Iterator[EntityId]:
        """Iterate owning entities in dense order."""
        return iter(self._entities)

    def values(self) -> Iterator[T]:
        """Iterate component values in dense order."""
        return iter(self._dense)

    def clear(self) -> None:
        """Remove every component from the store."""
        self._dense.clear()
        self._entities.clear()
        self._slots.clear()

    def __contains__(self, entity: object) -> bool:
        return entity in self._slots

    def __len__(self) -> int:
        return len(self._dense)

    def __iter__(self) -> Iterator[tuple[EntityId, T]]:
        """Iterate (entity, value) pairs in dense order.

        Order is insertion order only until the first removal.
        """
        return zip(self._entities, self._dense, strict=True)

    def __repr__(self) -> str:
        return f"ComponentStore({self.component_type.__qualname__}, size={len(self)})"
