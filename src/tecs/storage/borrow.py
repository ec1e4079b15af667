"""Runtime borrow tracking for registry queries.

A live query iterator holds a borrow on its registry:

- queries with only Read(...) positions take a shared borrow; any number of
  shared borrows may be outstanding at once,
- queries with a mutable position take an exclusive borrow, which excludes
  every other borrow.

While any borrow is outstanding, structural changes (appending or removing
components) are refused, because they would reorder the stores being iterated.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum, auto

from tecs.errors import BorrowError


class BorrowKind(Enum):
    """Kind of claim a query holds on the registry."""

    SHARED = auto()
    EXCLUSIVE = auto()


class BorrowTracker:
    """Counts outstanding shared and exclusive borrows of one registry."""

    __slots__ = ("_shared", "_exclusive")

    def __init__(self) -> None:
        self._shared = 0
        self._exclusive: str | None = None

    @property
    def shared_count(self) -> int:
        """Number of read-only borrows currently held."""
        return self._shared

    @property
    def is_exclusive(self) -> bool:
        """True while a mutable borrow is held."""
        return self._exclusive is not None

    @property
    def is_borrowed(self) -> bool:
        """True while any borrow is held."""
        return self._shared > 0 or self._exclusive is not None

    def acquire(self, kind: BorrowKind, holder: str) -> None:
        """Take a borrow.

        Args:
            kind: Shared or exclusive.
            holder: Description of the borrower, used in error messages.

        Raises:
            BorrowError: If the borrow conflicts with an outstanding one.
        """
        if self._exclusive is not None:
            raise BorrowError(
                f"Cannot start {holder}: {self._exclusive} holds a mutable borrow"
            )
        if kind is BorrowKind.EXCLUSIVE:
            if self._shared:
                raise BorrowError(
                    f"Cannot start {holder} with mutable access: "
                    f"{self._shared} read-only quer{'y' if self._shared == 1 else 'ies'} active"
                )
            self._exclusive = holder
        else:
            self._shared += 1

    def release(self, kind: BorrowKind) -> None:
        """Give back a borrow taken with acquire()."""
        if kind is BorrowKind.EXCLUSIVE:
            self._exclusive = None
        else:
            self._shared -= 1

    @contextmanager
    def borrow(self, kind: BorrowKind, holder: str) -> Iterator[None]:
        """Hold a borrow for the duration of the block."""
        self.acquire(kind, holder)
        try:
            yield
        finally:
            self.release(kind)

    def ensure_unborrowed(self, operation: str) -> None:
        """Raise BorrowError if any borrow is outstanding.

        Args:
            operation: Description of the structural change being attempted.
        """
        if self._exclusive is not None:
            raise BorrowError(f"Cannot {operation} while {self._exclusive} is iterating")
        if self._shared:
            raise BorrowError(f"Cannot {operation} while read-only queries are iterating")
