"""tecs: in-memory Entity Component System store.

Usage:
    from dataclasses import dataclass
    from tecs import Read, Registry

    @dataclass
    class Position:
        x: float
        y: float

    @dataclass
    class Speed:
        x: float
        y: float

    registry = Registry()
    entity = registry.spawn(Position(0.5, 0.3), Speed(1.0, 2.0))

    for entity, pos, speed in registry.query(Position, Read(Speed)):
        pos.x += speed.x
        pos.y += speed.y
"""

__version__ = "0.1.0"

# Core primitives
from tecs.core import (
    EntityId,
    Query,
    QueryResult,
    Read,
    SystemDescriptor,
    Write,
    component,
    system,
)

# Configuration
from tecs.config import TecsSettings

# Errors
from tecs.errors import (
    BorrowError,
    BuilderError,
    QueryError,
    RegistryCorruptedError,
    SystemExecutionError,
    TecsError,
    UnknownEntityError,
)

# Scheduling
from tecs.scheduling import SystemSchedule

# Storage
from tecs.storage import ComponentStore, EntityAllocator

# Registry
from tecs.world import EntityBuilder, Registry

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "component",
    "system",
    "SystemDescriptor",
    "Query",
    "QueryResult",
    "Read",
    "Write",
    # Registry
    "Registry",
    "EntityBuilder",
    # Storage
    "ComponentStore",
    "EntityAllocator",
    # Scheduling
    "SystemSchedule",
    # Config
    "TecsSettings",
    # Errors
    "TecsError",
    "UnknownEntityError",
    "RegistryCorruptedError",
    "BorrowError",
    "QueryError",
    "BuilderError",
    "SystemExecutionError",
]
