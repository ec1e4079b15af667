"""Registry and entity construction.

Architecture Note:
    world/ is the stateful layer that owns entities and component stores.
    core/ holds the stateless building blocks it is made of.
"""

from tecs.world.builder import EntityBuilder
from tecs.world.registry import Registry

__all__ = [
    "Registry",
    "EntityBuilder",
]
