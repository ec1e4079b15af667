"""System decorator.

Usage:
    # Mutable Position, read-only Speed
    @system(Position, Read(Speed))
    def movement(pos: Position, speed: Speed) -> None:
        pos.x += speed.x
        pos.y += speed.y

    # Receive the entity id as first argument
    @system(Health, with_entity=True)
    def report(entity: EntityId, health: Health) -> None:
        ...

    # Only Read positions
    @system.readonly(Health)
    def observe(health: Health) -> None:
        ...

    movement(registry)  # runs once per matching entity
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tecs.core.query.models import Accessor, Query, Read, Write
from tecs.core.system.models import SystemDescriptor


class _SystemDecorator:
    """System decorator factory. Used as @system(...) or @system.readonly(...)."""

    def __call__(
        self,
        *accessors: Accessor[Any],
        exclude: tuple[type, ...] = (),
        with_entity: bool = False,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Bind a function to a query.

        Args:
            *accessors: Component types (mutable), Read(...) or Write(...).
            exclude: Types an entity must not have to be processed.
            with_entity: Pass the entity id before the components.
            name: System name, defaults to the function name.

        Returns:
            Decorator that returns the system's descriptor.

        Raises:
            QueryError: If the accessors do not form a valid query.
        """
        query = Query(*accessors)
        if exclude:
            query = query.excluding(*exclude)

        def decorator(fn: Callable[..., Any]) -> SystemDescriptor:
            return SystemDescriptor(
                name=name or fn.__name__,
                run=fn,
                query=query,
                with_entity=with_entity,
            )

        return decorator

    def readonly(
        self,
        *component_types: Accessor[Any],
        exclude: tuple[type, ...] = (),
        with_entity: bool = False,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], SystemDescriptor]:
        """Read-only system (observers, reporting).

        Every position is wrapped in Read(...), so the system can run while
        other read-only queries are iterating.
        """
        accessors = [
            Read(t.component_type) if isinstance(t, Read | Write) else Read(t)
            for t in component_types
        ]
        return self(*accessors, exclude=exclude, with_entity=with_entity, name=name)


system = _SystemDecorator()
