"""Component decorator and metadata lookup.

Any class can be used as a component; stores are created the first time a
value of the class is attached. The decorator is optional and only validates
the class and exposes its metadata.

Usage:
    @component
    @dataclass(slots=True)
    class Position:
        x: float
        y: float

    Position.__component_meta__.type_name
"""

from __future__ import annotations

from tecs.core.component.models import ComponentTypeMeta


def _describe(cls: type) -> ComponentTypeMeta:
    return ComponentTypeMeta(
        component_type=cls,
        type_name=f"{cls.__module__}.{cls.__qualname__}",
    )


def component_meta(cls: type) -> ComponentTypeMeta:
    """Get metadata for a component class.

    Classes marked with @component return the metadata set by the decorator;
    any other class gets a fresh description.

    Args:
        cls: Component class.

    Returns:
        Metadata for the class.

    Raises:
        TypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Component type must be a class, got {cls!r}")
    # vars() so subclasses do not inherit a parent's metadata
    meta = vars(cls).get("__component_meta__")
    if isinstance(meta, ComponentTypeMeta):
        return meta
    return _describe(cls)


def is_component(cls: type) -> bool:
    """Check if a class was marked with @component."""
    return isinstance(cls, type) and "__component_meta__" in vars(cls)


def component[C: type](cls: C) -> C:
    """Mark a class as a component type.

    Optional: unmarked classes work as components too. Apply after
    @dataclass:

        >>> @component
        ... @dataclass(slots=True)
        ... class Health:
        ...     value: int

    Args:
        cls: The class to mark.

    Returns:
        The same class, with ``__component_meta__`` set.

    Raises:
        TypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Component type must be a class, got {cls!r}")
    cls.__component_meta__ = _describe(cls)  # type: ignore[attr-defined]
    return cls
