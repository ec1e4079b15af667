"""System scheduling and execution."""

from tecs.scheduling.scheduler import SystemSchedule

__all__ = [
    "SystemSchedule",
]
