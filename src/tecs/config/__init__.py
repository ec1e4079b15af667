"""Configuration module using Pydantic Settings.

Usage:
    from tecs.config import TecsSettings

    settings = TecsSettings(reuse_entity_ids=False)
    registry = Registry(settings=settings)
"""

from tecs.config.settings import TecsSettings

__all__ = [
    "TecsSettings",
]
