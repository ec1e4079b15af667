"""Sequential system schedule.

Usage:
    schedule = SystemSchedule()
    schedule.register_systems(movement, heal)
    schedule.run(registry)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from tecs.core.system import SystemDescriptor
from tecs.errors import SystemExecutionError

if TYPE_CHECKING:
    from tecs.world.registry import Registry

logger = logging.getLogger(__name__)


class SystemSchedule:
    """Holds a list of systems and runs them one after another.

    Systems run in registration order, each to completion before the next
    starts, so every system sees the changes made by the ones before it.

    Args:
        systems: Initial systems, in execution order.
    """

    def __init__(self, systems: Iterable[SystemDescriptor] = ()) -> None:
        self._systems: list[SystemDescriptor] = list(systems)

    def register_system(self, descriptor: SystemDescriptor) -> None:
        """Append a system to the end of the schedule."""
        self._systems.append(descriptor)

    def register_systems(self, *descriptors: SystemDescriptor) -> None:
        """Register multiple systems."""
        for d in descriptors:
            self.register_system(d)

    @property
    def systems(self) -> tuple[SystemDescriptor, ...]:
        """Registered systems in execution order."""
        return tuple(self._systems)

    def run(self, registry: Registry) -> dict[str, int]:
        """Run every system once against a registry.

        Args:
            registry: Registry the systems query.

        Returns:
            Rows processed per system name.

        Raises:
            SystemExecutionError: If a system raises. The original exception
                is chained as ``__cause__`` and later systems do not run.
        """
        processed: dict[str, int] = {}
        for descriptor in self._systems:
            start = time.perf_counter()
            try:
                rows = descriptor(registry)
            except Exception as e:
                raise SystemExecutionError(
                    descriptor.name, f"System '{descriptor.name}' failed: {e}"
                ) from e
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug("System %s processed %d rows in %.3f ms", descriptor.name, rows, elapsed_ms)
            processed[descriptor.name] = processed.get(descriptor.name, 0) + rows
        return processed

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[SystemDescriptor]:
        return iter(self._systems)
