"""System functionality: decorator and descriptors."""

from tecs.core.system.core import system
from tecs.core.system.models import SystemDescriptor

__all__ = [
    # Models
    "SystemDescriptor",
    # Core
    "system",
]
