"""Fluent entity construction.

Usage:
    entity = (
        registry.new_entity()
        .with_component(Position(0.5, 0.3))
        .with_component(Speed(1.0, 2.0))
        .build()
    )
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Self

from tecs.core.types import EntityId
from tecs.errors import BuilderError

if TYPE_CHECKING:
    from tecs.world.registry import Registry


class EntityBuilder:
    """Collects components and stores them on a new entity in one step.

    The entity id is only returned once every component is attached. If an
    attachment fails, the half-built entity is removed again before the
    error propagates, so no query ever sees it.

    Args:
        registry: Registry the entity will be created in.
    """

    def __init__(self, registry: Registry):
        self._registry = registry
        self._components: list[Any] = []
        self._built = False

    @property
    def pending(self) -> tuple[Any, ...]:
        """Components queued so far, in attachment order."""
        return tuple(self._components)

    def with_component(self, component: Any) -> Self:
        """Queue a component for the entity being built.

        Queuing two components of the same type warns; the last one wins.

        Raises:
            BuilderError: If build() was already called.
        """
        if self._built:
            raise BuilderError("Cannot add components: entity was already built")
        component_type = type(component)
        if any(type(queued) is component_type for queued in self._components):
            warnings.warn(
                f"EntityBuilder received multiple components of type {component_type.__name__}. "
                f"Only the last one will be kept.",
                stacklevel=2,
            )
        self._components.append(component)
        return self

    def with_components(self, *components: Any) -> Self:
        """Queue several components at once."""
        for component in components:
            self.with_component(component)
        return self

    def build(self) -> EntityId:
        """Create the entity and attach every queued component in order.

        Returns:
            Id of the newly created entity.

        Raises:
            BuilderError: If build() was already called.
            BorrowError: If a query on the registry is iterating. Nothing is
                created and the builder can be built once the query ends.
            TypeError: If a queued component is None.
        """
        if self._built:
            raise BuilderError("EntityBuilder.build() was already called")
        self._registry._borrows.ensure_unborrowed("build entity")

        entity = self._registry.create_entity()
        self._built = True
        try:
            for component in self._components:
                self._registry.attach(entity, component)
        except Exception:
            self._registry.remove_entity(entity)
            raise
        return entity
