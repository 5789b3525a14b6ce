"""Session - per-frame pipeline, input handling and lifecycle."""

from __future__ import annotations

import logging
import os
import random

from tick_dojo.clock import FrameClock, format_clock
from tick_dojo.combo import ComboController, make_combo_system
from tick_dojo.config import DojoConfig
from tick_dojo.ninja import make_ninja_system, move_to, spawn_ninja
from tick_dojo.projectiles import make_bomb_system, make_remnant_system, make_shuriken_system
from tick_dojo.render import RenderSink, present
from tick_dojo.resolver import make_resolver_system
from tick_dojo.signals import SignalBus, attach_ui
from tick_dojo.spawner import SpawnDirector, make_spawn_system, make_sushi_system
from tick_dojo.state import DojoState
from tick_dojo.types import Phase, System, UISink
from tick_dojo.visibility import make_visibility_system

logger = logging.getLogger(__name__)


class Session:
    """Owns the session state and runs it one display frame at a time.

    A playing frame runs its systems in a fixed order: spawn, entity
    updates, combo advance, visibility, collision. The pipeline stops at
    the first system that ends the game. A selecting frame only runs the
    combo countdown.
    """

    def __init__(
        self,
        config: DojoConfig | None = None,
        seed: int | None = None,
        ui: UISink | None = None,
    ) -> None:
        self._config = config if config is not None else DojoConfig()
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._clock = FrameClock(self._config.max_frame_dt)
        self._bus = SignalBus()
        self._director = SpawnDirector(self._config, self._rng)
        self._combo = ComboController()
        self._systems: list[System] = [
            make_spawn_system(self._director),
            make_ninja_system(),
            make_shuriken_system(),
            make_sushi_system(),
            make_remnant_system(),
            make_bomb_system(),
            make_combo_system(self._combo),
            make_visibility_system(),
            make_resolver_system(),
        ]
        self._state = DojoState(config=self._config, bus=self._bus)
        if ui is not None:
            attach_ui(self._bus, ui)

    @property
    def config(self) -> DojoConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> DojoState:
        return self._state

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def director(self) -> SpawnDirector:
        return self._director

    @property
    def combo(self) -> ComboController:
        return self._combo

    def start(self) -> DojoState:
        """(Re)initialize every session field and begin playing."""
        config = self._config
        self._bus.clear()
        self._clock.reset()
        state = DojoState(
            config=config,
            bus=self._bus,
            shuriken_timer=config.first_spawn_delay,
            sushi_timer=config.first_sushi_delay,
        )
        spawn_ninja(state)
        state.set_phase(Phase.PLAYING)
        self._state = state

        self._bus.publish("score", score=0)
        self._bus.publish("time", elapsed=0.0, text=format_clock(0.0))
        self._bus.publish("power_slots", count=0)
        logger.info("session started (seed=%d)", self._seed)
        self._bus.flush()
        return state

    def frame(self, dt: float) -> None:
        """Advance one display frame of ``dt`` seconds (capped by the clock)."""
        state = self._state
        if state.phase is Phase.PLAYING:
            ctx = self._clock.advance(dt, state.time_scale, self._rng)
            state.elapsed = ctx.elapsed
            self._bus.publish("time", elapsed=ctx.elapsed, text=format_clock(ctx.elapsed))
            for system in self._systems:
                system(state, ctx)
                if state.over:
                    break
        elif state.phase is Phase.SELECTING:
            ctx = self._clock.advance(dt, state.time_scale, self._rng, running=False)
            self._combo.tick_selection(state, ctx.dt)
        else:
            return
        self._bus.flush()

    def pointer_input(self, x: float, y: float) -> None:
        """Handle one tap, already mapped into canvas coordinates."""
        state = self._state
        point = (float(x), float(y))
        if state.phase is Phase.SELECTING:
            self._combo.add_point(state, point)
        elif state.phase is Phase.PLAYING:
            if self._combo.can_activate(state, point):
                self._combo.activate(state)
            elif not state.executing:
                body, ninja = state.ninja()
                move_to(ninja, body, point, self._config)
        else:
            return
        self._bus.flush()

    def present(self, sink: RenderSink) -> None:
        present(self._state, sink)
