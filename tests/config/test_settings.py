"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from tecs import Registry, TecsSettings


def test_defaults():
    settings = TecsSettings(_env_file=None)

    assert settings.max_query_arity == 8
    assert settings.reuse_entity_ids is True
    assert settings.first_entity_id == 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TECS_MAX_QUERY_ARITY", "3")
    monkeypatch.setenv("TECS_REUSE_ENTITY_IDS", "false")
    monkeypatch.setenv("TECS_FIRST_ENTITY_ID", "10")

    settings = TecsSettings(_env_file=None)

    assert settings.max_query_arity == 3
    assert settings.reuse_entity_ids is False
    assert settings.first_entity_id == 10


def test_registry_uses_settings():
    registry = Registry(settings=TecsSettings(_env_file=None, first_entity_id=10))

    assert registry.create_entity() == 10
    assert registry.settings.first_entity_id == 10


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        TecsSettings(_env_file=None, max_query_arity=0)
    with pytest.raises(ValidationError):
        TecsSettings(_env_file=None, first_entity_id=-1)
