"""Tests for entity storage and queries."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from tick_dojo.types import DeadEntityError
from tick_dojo.world import World


@dataclass
class Pos:
    x: float


@dataclass
class Tag:
    pass


def test_spawn_assigns_increasing_ids() -> None:
    world = World()
    assert world.spawn() == 0
    assert world.spawn() == 1


def test_spawn_with_components() -> None:
    world = World()
    eid = world.spawn(Pos(1.0), Tag())
    assert world.get(eid, Pos).x == 1.0
    assert world.count(Tag) == 1


def test_despawn_removes_components() -> None:
    world = World()
    eid = world.spawn(Pos(1.0))
    world.despawn(eid)
    assert not world.alive(eid)
    assert world.count(Pos) == 0
    assert list(world.query(Pos)) == []


def test_get_dead_entity_raises() -> None:
    world = World()
    eid = world.spawn(Pos(1.0))
    world.despawn(eid)
    with pytest.raises(DeadEntityError):
        world.get(eid, Pos)


def test_get_missing_component_raises_keyerror() -> None:
    world = World()
    eid = world.spawn()
    with pytest.raises(KeyError):
        world.get(eid, Pos)


def test_attach_to_dead_entity_raises() -> None:
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    with pytest.raises(DeadEntityError):
        world.attach(eid, Pos(0.0))


class TestQuery:
    def test_requires_all_types(self) -> None:
        world = World()
        a = world.spawn(Pos(1.0), Tag())
        world.spawn(Pos(2.0))
        assert [eid for eid, _ in world.query(Pos, Tag)] == [a]

    def test_yields_in_spawn_order(self) -> None:
        world = World()
        ids = [world.spawn(Pos(float(i))) for i in range(5)]
        assert [eid for eid, _ in world.query(Pos)] == ids

    def test_despawn_during_scan_skips_victim(self) -> None:
        world = World()
        first = world.spawn(Pos(0.0))
        second = world.spawn(Pos(1.0))
        seen = []
        for eid, (pos,) in world.query(Pos):
            seen.append(eid)
            if eid == first:
                world.despawn(second)
        assert seen == [first]

    def test_unknown_type_yields_nothing(self) -> None:
        world = World()
        world.spawn(Pos(0.0))
        assert list(world.query(Tag)) == []

    def test_no_types_yields_nothing(self) -> None:
        assert list(World().query()) == []
