"""Tests for 2D vector and angle helpers."""
from __future__ import annotations

import math

from tick_dojo import vec


class TestArithmetic:
    def test_add(self) -> None:
        assert vec.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)

    def test_sub(self) -> None:
        assert vec.sub((5.0, 3.0), (1.0, 2.0)) == (4.0, 1.0)

    def test_scale(self) -> None:
        assert vec.scale((1.0, -2.0), -1.0) == (-1.0, 2.0)


class TestMagnitude:
    def test_3_4_5(self) -> None:
        assert vec.magnitude((3.0, 4.0)) == 5.0

    def test_normalize_zero_is_noop(self) -> None:
        assert vec.normalize((0.0, 0.0)) == (0.0, 0.0)

    def test_with_magnitude(self) -> None:
        v = vec.with_magnitude((3.0, 4.0), 10.0)
        assert math.isclose(v[0], 6.0)
        assert math.isclose(v[1], 8.0)

    def test_with_magnitude_zero_stays_zero(self) -> None:
        assert vec.with_magnitude((0.0, 0.0), 10.0) == (0.0, 0.0)

    def test_clamp_magnitude_within_limit(self) -> None:
        assert vec.clamp_magnitude((3.0, 4.0), 10.0) == (3.0, 4.0)

    def test_clamp_magnitude_over_limit(self) -> None:
        v = vec.clamp_magnitude((30.0, 40.0), 10.0)
        assert math.isclose(vec.magnitude(v), 10.0)


class TestAngles:
    def test_heading_east(self) -> None:
        assert vec.heading((0.0, 0.0), (10.0, 0.0)) == 0.0

    def test_heading_coincident_is_zero(self) -> None:
        assert vec.heading((5.0, 5.0), (5.0, 5.0)) == 0.0

    def test_rotate_quarter_turn(self) -> None:
        x, y = vec.rotate((1.0, 0.0), math.pi / 2)
        assert math.isclose(x, 0.0, abs_tol=1e-12)
        assert math.isclose(y, 1.0)

    def test_wrap_in_range_untouched(self) -> None:
        assert vec.wrap_angle(math.pi / 2) == math.pi / 2

    def test_wrap_minus_pi_maps_to_pi(self) -> None:
        assert vec.wrap_angle(-math.pi) == math.pi

    def test_wrap_large_angles(self) -> None:
        assert math.isclose(vec.wrap_angle(3 * math.pi / 2), -math.pi / 2)
        assert math.isclose(vec.wrap_angle(-3 * math.pi / 2), math.pi / 2)
        assert math.isclose(vec.wrap_angle(5 * math.tau + 0.25), 0.25)


def test_clamp_to_rect() -> None:
    assert vec.clamp_to_rect((-5.0, 50.0), (0.0, 0.0), (10.0, 20.0)) == (0.0, 20.0)
    assert vec.clamp_to_rect((5.0, 5.0), (0.0, 0.0), (10.0, 20.0)) == (5.0, 5.0)
