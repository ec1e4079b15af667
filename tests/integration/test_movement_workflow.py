"""End-to-end workflow: build entities, run systems, remove, query again."""

from dataclasses import dataclass

import pytest

from tecs import Read, Registry, SystemSchedule, TecsSettings, UnknownEntityError, component, system


@component
@dataclass(slots=True)
class Position:
    x: float
    y: float


@component
@dataclass(slots=True)
class Velocity:
    dx: float
    dy: float


@component
@dataclass(frozen=True)
class Name:
    value: str


@system(Position, Read(Velocity))
def movement(position: Position, velocity: Velocity) -> None:
    position.x += velocity.dx
    position.y += velocity.dy


def test_full_lifecycle():
    registry = Registry(settings=TecsSettings(_env_file=None))
    ship = (
        registry.new_entity()
        .with_component(Name("ship"))
        .with_component(Position(0.0, 0.0))
        .with_component(Velocity(1.0, 0.5))
        .build()
    )
    rock = registry.spawn(Name("rock"), Position(5.0, 5.0))
    comet = registry.spawn(Name("comet"), Position(-1.0, 0.0), Velocity(-2.0, 0.0))

    schedule = SystemSchedule([movement])
    for _ in range(3):
        schedule.run(registry)

    assert registry.get(ship, Position) == Position(3.0, 1.5)
    assert registry.get(rock, Position) == Position(5.0, 5.0)
    assert registry.get(comet, Position) == Position(-7.0, 0.0)

    registry.remove_entity(comet)
    schedule.run(registry)

    names = {name.value for _, name, _ in registry.query(Read(Name), Read(Velocity))}
    assert names == {"ship"}
    with pytest.raises(UnknownEntityError):
        registry.remove_entity(comet)

    # comet's id is handed out again
    assert registry.spawn(Name("probe")) == comet
    assert not registry.has(comet, Velocity)


def test_frozen_components_replaced_through_attach():
    registry = Registry(settings=TecsSettings(_env_file=None))
    entity = registry.spawn(Name("old"))

    for row_entity, name in registry.query(Read(Name)):
        registry.attach(row_entity, Name(name.value.upper()))

    assert registry.get(entity, Name) == Name("OLD")
