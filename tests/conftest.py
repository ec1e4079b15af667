"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from tecs import Registry, TecsSettings, component


@pytest.fixture
def registry():
    """Fresh Registry with default settings."""
    return Registry(settings=TecsSettings(_env_file=None))


@component
@dataclass(slots=True)
class FixturePosition:
    x: float
    y: float


@component
@dataclass(slots=True)
class FixtureSpeed:
    x: float
    y: float


@pytest.fixture
def position_cls():
    return FixturePosition


@pytest.fixture
def speed_cls():
    return FixtureSpeed
