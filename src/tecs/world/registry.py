"""Registry: owner of entities and their component stores.

Usage:
    registry = Registry()

    entity = registry.create_entity()
    registry.attach(entity, Position(0.0, 0.0))
    registry.attach(entity, Speed(1.0, 2.0))

    for entity, pos, speed in registry.query(Position, Read(Speed)):
        pos.x += speed.x

    registry.remove_entity(entity)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, cast, overload

from tecs.config import TecsSettings
from tecs.core.component import component_meta
from tecs.core.query.engine import QueryResult
from tecs.core.query.models import Accessor, Query, Read
from tecs.core.query.operations import normalize_query
from tecs.core.types import EntityId
from tecs.errors import RegistryCorruptedError, UnknownEntityError
from tecs.storage.allocator import EntityAllocator
from tecs.storage.borrow import BorrowTracker
from tecs.storage.component_store import ComponentStore

if TYPE_CHECKING:
    from tecs.world.builder import EntityBuilder

logger = logging.getLogger(__name__)


class Registry:
    """Entity and component store.

    Holds one ComponentStore per component class ever attached, keyed by the
    class itself. The registry is the only writer of store membership:
    an entity is in a store iff it currently has a component of that type.

    Args:
        settings: Registry configuration. Defaults to TecsSettings(), which
            reads TECS_* environment variables.
    """

    def __init__(self, settings: TecsSettings | None = None):
        self._settings = settings or TecsSettings()
        self._allocator = EntityAllocator(
            first_id=self._settings.first_entity_id,
            reuse_ids=self._settings.reuse_entity_ids,
        )
        self._stores: dict[type, ComponentStore[Any]] = {}
        # Types held by each live entity, so removal only visits those stores
        self._held: dict[EntityId, set[type]] = {}
        self._borrows = BorrowTracker()

    @property
    def settings(self) -> TecsSettings:
        """Settings this registry was created with."""
        return self._settings

    # Store lookup

    def _store[T](self, component_type: type[T]) -> ComponentStore[T] | None:
        """Find the store for a type without creating it."""
        return cast(ComponentStore[T] | None, self._stores.get(component_type))

    def _create_store[T](self, component_type: type[T]) -> ComponentStore[T]:
        store = ComponentStore(component_type)
        self._stores[component_type] = store
        logger.debug("Created component store for %s", component_meta(component_type).type_name)
        return store

    def _require_alive(self, entity: EntityId, operation: str) -> None:
        if not self._allocator.is_alive(entity):
            raise UnknownEntityError(entity, operation)

    # Entity lifecycle

    def create_entity(self) -> EntityId:
        """Allocate a new entity with no components.

        Returns:
            The new entity id. Freed ids are reused smallest first unless
            the registry was configured with ``reuse_entity_ids=False``.
        """
        entity = self._allocator.allocate()
        self._held[entity] = set()
        return entity

    def remove_entity(self, entity: EntityId) -> None:
        """Remove an entity and every component attached to it.

        The id goes back to the free pool.

        Args:
            entity: Entity to remove.

        Raises:
            UnknownEntityError: If the entity is not alive.
            BorrowError: If a query is iterating.
            RegistryCorruptedError: If a store did not hold a component the
                registry recorded for the entity.
        """
        self._require_alive(entity, "remove entity")
        self._borrows.ensure_unborrowed(f"remove entity {entity}")

        missing: list[type] = []
        for component_type in self._held.pop(entity):
            store = self._stores.get(component_type)
            if store is None or store.remove(entity) is None:
                missing.append(component_type)
        self._allocator.deallocate(entity)
        logger.debug("Removed entity %s", entity)

        if missing:
            names = ", ".join(t.__qualname__ for t in missing)
            raise RegistryCorruptedError(
                f"Entity {entity} was recorded as holding {names} but the store disagreed"
            )

    def is_alive(self, entity: EntityId) -> bool:
        """Check if an entity exists and has not been removed."""
        return self._allocator.is_alive(entity)

    def entities(self) -> Iterator[EntityId]:
        """Iterate alive entities in ascending id order.

        Iterates a snapshot, so entities may be removed during the loop.
        """
        return iter(self._allocator)

    # Components

    def attach(self, entity: EntityId, component: Any) -> Any | None:
        """Attach a component to an entity, replacing one of the same type.

        The component's store is created on first use of its type.

        Args:
            entity: Target entity.
            component: Component instance (type inferred).

        Returns:
            The replaced component, or None if the entity had none of this type.

        Raises:
            UnknownEntityError: If the entity is not alive.
            TypeError: If component is None.
            BorrowError: If this would add a new component while a query is iterating.
        """
        self._require_alive(entity, "attach component")
        if component is None:
            raise TypeError("Cannot attach None as a component")

        component_type = type(component)
        store = self._store(component_type)
        if store is None or entity not in store:
            self._borrows.ensure_unborrowed(f"attach {component_type.__name__}")
            if store is None:
                store = self._create_store(component_type)
            self._held[entity].add(component_type)
        return store.insert(entity, component)

    def detach[T](self, entity: EntityId, component_type: type[T]) -> T | None:
        """Remove one component from an entity.

        Args:
            entity: Target entity.
            component_type: Type of component to remove.

        Returns:
            The removed component, or None if the entity did not have one.

        Raises:
            UnknownEntityError: If the entity is not alive.
            BorrowError: If a query is iterating.
        """
        self._require_alive(entity, "detach component")
        store = self._store(component_type)
        if store is None or entity not in store:
            return None

        self._borrows.ensure_unborrowed(f"detach {component_type.__name__}")
        self._held[entity].discard(component_type)
        return store.remove(entity)

    def has(self, entity: EntityId, component_type: type) -> bool:
        """Check if an entity has a component of this type.

        Returns False for unknown types and dead entities.
        """
        store = self._store(component_type)
        return store is not None and entity in store

    def get[T](self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get an entity's component, or None if absent."""
        store = self._store(component_type)
        if store is None:
            return None
        return store.get(entity)

    def get_mut[T](self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get an entity's stored component for in-place mutation, or None."""
        store = self._store(component_type)
        if store is None:
            return None
        return store.get_mut(entity)

    def component_types(self, entity: EntityId) -> frozenset[type]:
        """Get the component types attached to an entity (empty if dead)."""
        return frozenset(self._held.get(entity, ()))

    # Queries

    @overload
    def query[A](self, a: Accessor[A], /) -> QueryResult[tuple[EntityId, A]]: ...

    @overload
    def query[A, B](
        self, a: Accessor[A], b: Accessor[B], /
    ) -> QueryResult[tuple[EntityId, A, B]]: ...

    @overload
    def query[A, B, C](
        self, a: Accessor[A], b: Accessor[B], c: Accessor[C], /
    ) -> QueryResult[tuple[EntityId, A, B, C]]: ...

    @overload
    def query[A, B, C, D](
        self, a: Accessor[A], b: Accessor[B], c: Accessor[C], d: Accessor[D], /
    ) -> QueryResult[tuple[EntityId, A, B, C, D]]: ...

    @overload
    def query[A, B, C, D, E](
        self,
        a: Accessor[A],
        b: Accessor[B],
        c: Accessor[C],
        d: Accessor[D],
        e: Accessor[E],
        /,
    ) -> QueryResult[tuple[EntityId, A, B, C, D, E]]: ...

    @overload
    def query[A, B, C, D, E, F](
        self,
        a: Accessor[A],
        b: Accessor[B],
        c: Accessor[C],
        d: Accessor[D],
        e: Accessor[E],
        f: Accessor[F],
        /,
    ) -> QueryResult[tuple[EntityId, A, B, C, D, E, F]]: ...

    @overload
    def query[A, B, C, D, E, F, G](
        self,
        a: Accessor[A],
        b: Accessor[B],
        c: Accessor[C],
        d: Accessor[D],
        e: Accessor[E],
        f: Accessor[F],
        g: Accessor[G],
        /,
    ) -> QueryResult[tuple[EntityId, A, B, C, D, E, F, G]]: ...

    @overload
    def query[A, B, C, D, E, F, G, H](
        self,
        a: Accessor[A],
        b: Accessor[B],
        c: Accessor[C],
        d: Accessor[D],
        e: Accessor[E],
        f: Accessor[F],
        g: Accessor[G],
        h: Accessor[H],
        /,
    ) -> QueryResult[tuple[EntityId, A, B, C, D, E, F, G, H]]: ...

    @overload
    def query(self, query: Query, /) -> QueryResult[tuple[Any, ...]]: ...

    def query(self, *accessors: Any) -> QueryResult[Any]:
        """Query entities holding all of the given component types.

        The query is validated immediately and evaluated lazily. Rows are
        ``(entity, component1, component2, ...)`` holding the stored objects
        themselves, so in-place changes persist.

        Example:
            >>> for entity, pos, vel in registry.query(Position, Read(Velocity)):
            ...     pos.x += vel.dx

        Args:
            *accessors: Component types, Read(...)/Write(...) markers, or one Query.

        Returns:
            Lazy QueryResult.

        Raises:
            QueryError: If the query is empty, repeats a type, or requests
                more than ``settings.max_query_arity`` types.
        """
        return QueryResult(self, normalize_query(accessors, self._settings.max_query_arity))

    def components[T](self, component_type: type[T]) -> QueryResult[tuple[EntityId, T]]:
        """Iterate ``(entity, component)`` for every component of one type.

        Read-only, so it can run alongside other read-only queries.
        """
        return self.query(Read(component_type))

    # Construction helpers

    def new_entity(self) -> EntityBuilder:
        """Start building an entity. Nothing is stored until build()."""
        from tecs.world.builder import EntityBuilder

        return EntityBuilder(self)

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity with all given components attached.

        Shorthand for ``new_entity().with_components(*components).build()``.
        """
        return self.new_entity().with_components(*components).build()

    def __len__(self) -> int:
        return len(self._allocator)

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, int) and self._allocator.is_alive(entity)

    def __repr__(self) -> str:
        return f"Registry(entities={len(self)}, stores={len(self._stores)})"
