"""Frame clock: turns wall-clock frame deltas into TickContexts."""

from __future__ import annotations

import random

from tick_dojo.types import TickContext


class FrameClock:
    """Variable-step clock driven by display frames.

    Each frame delta is capped at ``max_dt`` so a stalled display does not
    teleport entities. ``elapsed`` is play time: it accumulates scaled
    deltas, and only for frames advanced with ``running=True``.
    """

    def __init__(self, max_dt: float = 0.1) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._frame = 0
        self._elapsed = 0.0

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def clamp(self, dt: float) -> float:
        return max(0.0, min(dt, self._max_dt))

    def advance(
        self,
        dt: float,
        time_scale: float,
        rng: random.Random,
        *,
        running: bool = True,
    ) -> TickContext:
        dt = self.clamp(dt)
        self._frame += 1
        scaled = dt * time_scale
        if running:
            self._elapsed += scaled
        return TickContext(
            frame=self._frame,
            dt=dt,
            scaled_dt=scaled,
            time_scale=time_scale,
            elapsed=self._elapsed,
            random=rng,
        )

    def reset(self) -> None:
        self._frame = 0
        self._elapsed = 0.0


def format_clock(seconds: float) -> str:
    """Format elapsed seconds as ``m:ss``."""
    seconds = max(0.0, seconds)
    minutes = int(seconds // 60)
    return f"{minutes}:{int(seconds % 60):02d}"
