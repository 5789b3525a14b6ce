"""Tests for the frame clock."""
from __future__ import annotations

import math
import random

import pytest

from tick_dojo.clock import FrameClock, format_clock


def test_rejects_non_positive_cap() -> None:
    with pytest.raises(ValueError):
        FrameClock(0.0)


def test_delta_capped_at_max() -> None:
    clock = FrameClock(0.1)
    ctx = clock.advance(5.0, 1.0, random.Random(1))
    assert ctx.dt == 0.1
    assert clock.elapsed == 0.1


def test_negative_delta_clamped_to_zero() -> None:
    clock = FrameClock(0.1)
    ctx = clock.advance(-1.0, 1.0, random.Random(1))
    assert ctx.dt == 0.0


def test_scaled_delta_and_elapsed() -> None:
    clock = FrameClock(0.1)
    ctx = clock.advance(0.05, 0.5, random.Random(1))
    assert math.isclose(ctx.scaled_dt, 0.025)
    assert math.isclose(ctx.elapsed, 0.025)
    assert ctx.frame == 1


def test_not_running_frames_do_not_accumulate() -> None:
    clock = FrameClock(0.1)
    clock.advance(0.05, 1.0, random.Random(1), running=False)
    assert clock.elapsed == 0.0
    assert clock.frame == 1


def test_reset() -> None:
    clock = FrameClock(0.1)
    clock.advance(0.05, 1.0, random.Random(1))
    clock.reset()
    assert clock.frame == 0
    assert clock.elapsed == 0.0


@pytest.mark.parametrize(
    "seconds, text",
    [(0.0, "0:00"), (9.99, "0:09"), (61.5, "1:01"), (600.0, "10:00"), (-3.0, "0:00")],
)
def test_format_clock(seconds: float, text: str) -> None:
    assert format_clock(seconds) == text
