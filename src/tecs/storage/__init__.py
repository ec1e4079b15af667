"""Component storage, entity allocation, and borrow tracking."""

from tecs.storage.allocator import EntityAllocator
from tecs.storage.borrow import BorrowKind, BorrowTracker
from tecs.storage.component_store import ComponentStore

__all__ = [
    "ComponentStore",
    "EntityAllocator",
    "BorrowKind",
    "BorrowTracker",
]
