"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains building blocks with no runtime state of their own:
    component metadata, the query model and engine, and systems.
    For stateful services, see world/, storage/, and scheduling/.
"""

from tecs.core.component import (
    ComponentTypeMeta,
    component,
    component_meta,
    is_component,
)
from tecs.core.query import (
    Access,
    Accessor,
    Query,
    QueryResult,
    Read,
    Write,
    normalize_query,
    run_query,
)
from tecs.core.system import SystemDescriptor, system
from tecs.core.types import EntityId

__all__ = [
    # Types
    "EntityId",
    # Component
    "component",
    "component_meta",
    "is_component",
    "ComponentTypeMeta",
    # Query
    "Query",
    "Read",
    "Write",
    "Access",
    "Accessor",
    "QueryResult",
    "normalize_query",
    "run_query",
    # System
    "system",
    "SystemDescriptor",
]
