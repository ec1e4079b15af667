"""Registry settings with environment variable support.

Usage:
    from tecs.config import TecsSettings

    # Load from environment variables (TECS_*)
    settings = TecsSettings()

    # Or override with explicit values
    settings = TecsSettings(max_query_arity=4)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TecsSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a Registry.

    Attributes:
        max_query_arity: Largest number of component types a single query may request.
        reuse_entity_ids: If True, removed ids are handed out again, smallest first.
            If False, ids strictly increase and are never reused.
        first_entity_id: First id handed out by a fresh registry.

    Environment Variables:
        TECS_MAX_QUERY_ARITY
        TECS_REUSE_ENTITY_IDS
        TECS_FIRST_ENTITY_ID
    """

    model_config = SettingsConfigDict(
        env_prefix="TECS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_query_arity: int = Field(default=8, ge=1)
    reuse_entity_ids: bool = True
    first_entity_id: int = Field(default=0, ge=0)
