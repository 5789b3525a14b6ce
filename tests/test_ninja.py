"""Tests for avatar movement, swing progress and hit predicates."""
from __future__ import annotations

import math
import random

import pytest

from tick_dojo import vec
from tick_dojo.components import Body, Ninja
from tick_dojo.config import DojoConfig
from tick_dojo.ninja import (
    bearing_offset,
    in_front_arc,
    in_front_sector,
    is_behind,
    move_to,
    step_ninja,
)

CONFIG = DojoConfig()


def _ninja_at(x: float, y: float, angle: float = 0.0) -> tuple[Ninja, Body]:
    return Ninja(target=(x, y), start=(x, y), angle=angle), Body(position=(x, y))


class TestMoveTo:
    def test_short_move_is_exact(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        target = move_to(ninja, body, (400.0, 247.5), CONFIG)
        assert target == (400.0, 247.5)
        assert ninja.moving
        assert ninja.swing == 0.0
        assert ninja.angle == 0.0
        assert ninja.start == (340.0, 247.5)

    def test_restricted_move_clamped_to_range(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        target = move_to(ninja, body, (340.0, 47.5), CONFIG)
        assert target[0] == pytest.approx(340.0)
        assert target[1] == pytest.approx(127.5)

    def test_unrestricted_move_ignores_range(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        target = move_to(ninja, body, (100.0, 247.5), CONFIG, unrestricted=True)
        assert target == (100.0, 247.5)

    def test_destination_clamped_to_bounds(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        target = move_to(ninja, body, (0.0, 0.0), CONFIG, unrestricted=True)
        assert target == (75.0, 75.0)

    def test_faces_destination(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (340.0, 300.0), CONFIG)
        assert ninja.angle == pytest.approx(math.pi / 2)

    def test_zero_length_move_keeps_facing(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5, angle=1.0)
        move_to(ninja, body, (340.0, 247.5), CONFIG)
        assert ninja.angle == 1.0

    def test_restricted_moves_stay_in_range_and_bounds(self) -> None:
        rng = random.Random(1234)
        lo, hi = CONFIG.ninja_bounds()
        for _ in range(500):
            start = (rng.uniform(lo[0], hi[0]), rng.uniform(lo[1], hi[1]))
            ninja, body = _ninja_at(*start)
            point = (rng.uniform(-100.0, 800.0), rng.uniform(-100.0, 600.0))
            target = move_to(ninja, body, point, CONFIG)
            assert vec.distance(start, target) <= CONFIG.move_range + 1e-9
            assert lo[0] <= target[0] <= hi[0]
            assert lo[1] <= target[1] <= hi[1]


class TestStep:
    def test_moves_at_speed(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (440.0, 247.5), CONFIG)
        step_ninja(ninja, body, 0.1, CONFIG)
        assert body.position[0] == pytest.approx(377.5)

    def test_combo_speed_is_slower(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (440.0, 247.5), CONFIG)
        step_ninja(ninja, body, 0.1, CONFIG, executing=True)
        assert body.position[0] == pytest.approx(368.0)

    def test_never_overshoots(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (350.0, 247.5), CONFIG)
        step_ninja(ninja, body, 0.1, CONFIG)
        assert body.position == (350.0, 247.5)

    def test_arrival_snaps_and_stops(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (343.0, 247.5), CONFIG)
        arrived = step_ninja(ninja, body, 0.01, CONFIG)
        assert arrived
        assert body.position == (343.0, 247.5)
        assert not ninja.moving
        assert ninja.swing == 0.0

    def test_swing_capped_at_one_in_normal_play(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (440.0, 247.5), CONFIG)
        step_ninja(ninja, body, 0.1, CONFIG)
        # 37.5 of 100 travelled, doubled
        assert ninja.swing == pytest.approx(0.75)
        step_ninja(ninja, body, 0.1, CONFIG)
        assert ninja.swing == 1.0

    def test_swing_unbounded_during_combo(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        move_to(ninja, body, (440.0, 247.5), CONFIG, unrestricted=True)
        for _ in range(3):
            step_ninja(ninja, body, 0.1, CONFIG, executing=True)
        # 84 of 100 travelled
        assert ninja.swing == pytest.approx(1.68)

    def test_glow_phase_advances_only_when_glowing(self) -> None:
        ninja, body = _ninja_at(340.0, 247.5)
        step_ninja(ninja, body, 0.1, CONFIG)
        assert ninja.glow_phase == 0.0
        ninja.glowing = True
        step_ninja(ninja, body, 0.1, CONFIG)
        assert ninja.glow_phase == pytest.approx(0.5)

    def test_stays_in_bounds_while_travelling(self) -> None:
        rng = random.Random(99)
        lo, hi = CONFIG.ninja_bounds()
        ninja, body = _ninja_at(340.0, 247.5)
        for _ in range(200):
            if not ninja.moving:
                move_to(ninja, body, (rng.uniform(0, 680), rng.uniform(0, 495)), CONFIG)
            step_ninja(ninja, body, 0.1, CONFIG)
            assert lo[0] <= body.position[0] <= hi[0]
            assert lo[1] <= body.position[1] <= hi[1]


class TestArcs:
    def test_point_ahead_in_reach_is_front(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        assert in_front_arc(ninja, body, (140.0, 100.0), 14.0, CONFIG)
        assert not is_behind(ninja, body, (140.0, 100.0))

    def test_point_ahead_out_of_reach_is_not_front(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        assert not in_front_arc(ninja, body, (170.0, 100.0), 14.0, CONFIG)

    def test_reach_includes_point_radius(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        assert in_front_arc(ninja, body, (160.0, 100.0), 14.0, CONFIG)
        assert not in_front_arc(ninja, body, (160.0, 100.0), 0.0, CONFIG)

    def test_point_behind(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        assert is_behind(ninja, body, (80.0, 100.0))
        assert not in_front_arc(ninja, body, (80.0, 100.0), 14.0, CONFIG)

    def test_facing_wraps_around(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0, angle=math.pi - 0.1)
        # bearing -pi + 0.1 is only 0.2 rad off a facing of pi - 0.1
        point = vec.add(body.position, vec.rotate((20.0, 0.0), -math.pi + 0.1))
        assert in_front_arc(ninja, body, point, 0.0, CONFIG)

    def test_exact_right_angle_is_behind(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0)
        assert bearing_offset(ninja, body.position, (100.0, 120.0)) == math.pi / 2
        assert is_behind(ninja, body, (100.0, 120.0))
        assert is_behind(ninja, body, (100.0, 80.0))
        assert not in_front_arc(ninja, body, (100.0, 120.0), 14.0, CONFIG)

    def test_coincident_point_reads_as_front(self) -> None:
        ninja, body = _ninja_at(100.0, 100.0, angle=2.0)
        assert in_front_arc(ninja, body, (100.0, 100.0), 14.0, CONFIG)
        assert not is_behind(ninja, body, (100.0, 100.0))

    def test_front_and_behind_partition_the_reach(self) -> None:
        rng = random.Random(5)
        for _ in range(1000):
            ninja, body = _ninja_at(300.0, 200.0, angle=rng.uniform(-math.pi, math.pi))
            offset = vec.rotate((rng.uniform(0.1, CONFIG.swing_radius - 1.0), 0.0), rng.uniform(-4.0, 4.0))
            point = vec.add(body.position, offset)
            front = in_front_arc(ninja, body, point, 0.0, CONFIG)
            behind = is_behind(ninja, body, point)
            assert front != behind
            assert front == in_front_sector(ninja, body.position, point)
