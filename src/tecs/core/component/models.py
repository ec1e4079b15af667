"""Component models: descriptive metadata for component classes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ComponentTypeMeta:
    """Metadata describing a component class.

    Stores are keyed by the class object itself, so two classes sharing a
    qualified name still get separate stores. ``type_name`` is for display.
    """

    component_type: type
    type_name: str
