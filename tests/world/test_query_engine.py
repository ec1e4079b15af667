"""Tests for running queries against a Registry."""

from dataclasses import dataclass

import pytest

from tecs import BorrowError, Query, QueryError, Read, Registry, TecsSettings, Write
from tecs.core.query import run_query


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Speed:
    x: float
    y: float


@dataclass
class Health:
    health: float


@dataclass
class Burnable:
    pass


@dataclass
class Frozen:
    pass


@pytest.fixture
def populated(registry):
    """Three entities with overlapping component sets."""
    registry.spawn(Position(0.5, 2.3), Speed(1.0, 4.0))
    registry.spawn(Position(1.0, 2.3), Speed(12.0, 42.0), Health(100.0), Burnable())
    registry.spawn(Position(18.2, 4.5), Speed(122.0, 12.0), Health(95.0), Burnable())
    return registry


def test_two_entity_scenario(registry):
    a = registry.spawn(Position(0.5, 0.3), Speed(1.0, 2.0))
    b = registry.spawn(Position(1.2, 2.2), Speed(0.5, 0.1))

    rows = {entity: (pos, speed) for entity, pos, speed in registry.query(Position, Speed)}

    assert rows == {
        a: (Position(0.5, 0.3), Speed(1.0, 2.0)),
        b: (Position(1.2, 2.2), Speed(0.5, 0.1)),
    }


def test_match_counts(populated):
    assert populated.query(Position, Read(Speed)).count() == 3
    assert populated.query(Position, Read(Health)).count() == 2
    assert populated.query(Position, Read(Health), Read(Burnable)).count() == 2


def test_rows_follow_position_order(populated):
    entity, health, position = populated.query(Health, Position).first()

    assert isinstance(health, Health)
    assert isinstance(position, Position)
    assert populated.get(entity, Health) is health


def test_components_omits_entity(populated):
    first = next(populated.query(Position, Read(Speed)).components())

    assert first == (Position(0.5, 2.3), Speed(1.0, 4.0))


def test_mutation_through_rows_persists(populated):
    for _, health in populated.query(Health):
        health.health = 100.0

    assert all(h.health == 100.0 for _, h in populated.components(Health))


def test_removed_entity_excluded(registry):
    for i in range(3):
        registry.spawn(Position(float(i), 0.0), Health(float(i)))

    registry.remove_entity(1)

    assert sorted(registry.query(Position, Health).entities()) == [0, 2]
    assert registry.get(0, Position) == Position(0.0, 0.0)
    assert registry.get(2, Health) == Health(2.0)


def test_never_attached_type_yields_nothing(populated):
    assert list(populated.query(Position, Frozen)) == []


def test_empty_store_yields_nothing(registry):
    entity = registry.spawn(Frozen())
    registry.detach(entity, Frozen)

    assert list(registry.query(Frozen)) == []


def test_excluding(populated):
    not_burnable = populated.query(Query(Position).excluding(Burnable))

    assert list(not_burnable.entities()) == [0]


def test_excluded_type_never_attached_is_ignored(populated):
    assert populated.query(Query(Position).excluding(Frozen)).count() == 3


def test_driver_is_smallest_store(populated):
    """Iteration follows the smallest store's dense order."""
    populated.spawn(Health(1.0), Position(0, 0))
    populated.remove_entity(1)

    # Health store is [3, 2] after swap-remove; Position store is larger
    assert list(populated.query(Position, Health).entities()) == list(
        populated._store(Health).entities()
    )


def test_results_are_reevaluated(registry):
    result = registry.query(Position)
    assert result.count() == 0

    registry.spawn(Position(0, 0))
    assert result.count() == 1


def test_first_on_empty(registry):
    registry.spawn(Speed(0, 0))

    assert registry.query(Speed, Position).first() is None


def test_run_query_equivalent(populated):
    query = Query(Position, Read(Burnable))

    assert list(run_query(populated, query).entities()) == list(
        populated.query(query).entities()
    )


def test_arity_above_configured_limit_rejected():
    registry = Registry(settings=TecsSettings(_env_file=None, max_query_arity=2))

    with pytest.raises(QueryError, match="maximum is 2"):
        registry.query(Position, Speed, Health)


def test_eight_way_query(registry):
    types = [type(f"C{i}", (), {}) for i in range(8)]
    entity = registry.spawn(*(t() for t in types))
    registry.spawn(*(t() for t in types[:7]))

    rows = list(registry.query(*types))

    assert [row[0] for row in rows] == [entity]
    assert len(rows[0]) == 9


def test_duplicate_types_rejected(registry):
    with pytest.raises(QueryError):
        registry.query(Position, Write(Position))


def test_two_mutable_queries_conflict(populated):
    outer = iter(populated.query(Position))
    next(outer)

    with pytest.raises(BorrowError, match="holds a mutable borrow"):
        next(iter(populated.query(Health)))
    outer.close()


def test_read_only_queries_coexist(populated):
    pairs = [
        (a, b)
        for a, _ in populated.query(Read(Position))
        for b, _ in populated.query(Read(Health))
    ]

    assert len(pairs) == 3 * 2


def test_mutable_query_inside_read_query_conflicts(populated):
    with pytest.raises(BorrowError, match="read-only"):
        for _ in populated.query(Read(Position)):
            for _ in populated.query(Health):
                pass


def test_borrow_released_after_break(populated):
    for _ in populated.query(Position):
        break

    populated.remove_entity(0)


def test_lookups_allowed_during_query(populated):
    seen = []
    for entity, _ in populated.query(Position):
        seen.append(populated.get(entity, Speed))
        populated.has(entity, Health)

    assert len(seen) == 3
