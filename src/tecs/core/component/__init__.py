"""Component functionality: metadata and decorator."""

from tecs.core.component.core import component, component_meta, is_component
from tecs.core.component.models import ComponentTypeMeta

__all__ = [
    # Models
    "ComponentTypeMeta",
    # Core
    "component",
    "component_meta",
    "is_component",
]
