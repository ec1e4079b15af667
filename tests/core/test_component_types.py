"""Tests for component metadata and the @component decorator."""

from dataclasses import dataclass

import pytest

from tecs import component
from tecs.core.component import ComponentTypeMeta, component_meta, is_component


@component
@dataclass
class Tagged:
    label: str


@dataclass
class Plain:
    value: int


def test_decorator_exposes_meta():
    meta = Tagged.__component_meta__

    assert is_component(Tagged)
    assert meta.component_type is Tagged
    assert meta.type_name.endswith("test_component_types.Tagged")
    assert component_meta(Tagged) is meta


def test_undecorated_class_described_on_demand():
    meta = component_meta(Plain)

    assert not is_component(Plain)
    assert meta == ComponentTypeMeta(component_type=Plain, type_name=meta.type_name)
    assert meta.type_name.endswith("Plain")


def test_subclass_does_not_inherit_meta():
    class Child(Tagged):
        pass

    assert not is_component(Child)
    assert component_meta(Child).component_type is Child


def test_redefined_classes_stay_distinct():
    def make():
        @component
        @dataclass
        class Twin:
            value: int

        return Twin

    first, second = make(), make()

    assert first.__component_meta__.type_name == second.__component_meta__.type_name
    assert component_meta(first).component_type is first
    assert component_meta(second).component_type is second


def test_non_class_rejected():
    with pytest.raises(TypeError, match="must be a class"):
        component(Plain(1))  # type: ignore[type-var]
    with pytest.raises(TypeError, match="must be a class"):
        component_meta(Plain(1))  # type: ignore[arg-type]
