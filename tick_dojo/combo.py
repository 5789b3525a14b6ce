"""Combo-path controller: point selection in slow motion, then path execution.

The controller is a small guard-table state machine over ``ComboPath.state``::

    inactive  --(tap on ready avatar)-->  selecting
    selecting --path_full / expired_with_points-->  executing
    selecting --expired-->  inactive
    executing --legs_done-->  inactive

Activation is input-driven; the other edges are evaluated each frame.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_dojo import vec
from tick_dojo.ninja import move_to
from tick_dojo.types import ComboState, Phase
from tick_dojo.vec import Vec

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import System, TickContext

logger = logging.getLogger(__name__)

TRANSITIONS: dict[ComboState, list[tuple[str, ComboState]]] = {
    ComboState.SELECTING: [
        ("path_full", ComboState.EXECUTING),
        ("expired_with_points", ComboState.EXECUTING),
        ("expired", ComboState.INACTIVE),
    ],
    ComboState.EXECUTING: [("legs_done", ComboState.INACTIVE)],
}


class ComboGuards:
    """Maps guard name strings to predicates over the session state."""

    def __init__(self) -> None:
        self._guards: dict[str, Callable[[DojoState], bool]] = {}

    def register(self, name: str, fn: Callable[[DojoState], bool]) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, state: DojoState) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](state)


def _path_full(state: DojoState) -> bool:
    return len(state.combo.points) >= state.config.combo_max_points


def _expired(state: DojoState) -> bool:
    return state.combo.countdown <= 0.0


def _expired_with_points(state: DojoState) -> bool:
    return _expired(state) and bool(state.combo.points)


def _legs_done(state: DojoState) -> bool:
    _, ninja = state.ninja()
    return not ninja.moving and state.combo.index >= len(state.combo.path)


def default_guards() -> ComboGuards:
    guards = ComboGuards()
    guards.register("path_full", _path_full)
    guards.register("expired", _expired)
    guards.register("expired_with_points", _expired_with_points)
    guards.register("legs_done", _legs_done)
    return guards


class ComboController:
    """Drives ``state.combo`` through selection and execution."""

    def __init__(self, guards: ComboGuards | None = None) -> None:
        self._guards = guards if guards is not None else default_guards()

    @property
    def guards(self) -> ComboGuards:
        return self._guards

    def can_activate(self, state: DojoState, point: Vec) -> bool:
        config = state.config
        body, _ = state.ninja()
        return (
            state.combo.state is ComboState.INACTIVE
            and state.sushi_count >= config.sushi_cap
            and vec.distance(point, body.position) < config.ninja_radius + config.combo_tap_slack
        )

    def activate(self, state: DojoState) -> None:
        """Enter point selection: slow time and start the countdown."""
        combo = state.combo
        combo.points = []
        combo.countdown = state.config.combo_countdown
        state.time_scale = state.config.combo_time_scale
        self._switch(state, ComboState.SELECTING)
        state.set_phase(Phase.SELECTING)

    def add_point(self, state: DojoState, point: Vec) -> bool:
        """Record a tap during selection. Completes selection when the path is full."""
        combo = state.combo
        if combo.state is not ComboState.SELECTING:
            return False
        if len(combo.points) >= state.config.combo_max_points:
            return False
        combo.points.append(point)
        self.evaluate(state)
        return True

    def tick_selection(self, state: DojoState, dt: float) -> None:
        if state.combo.state is not ComboState.SELECTING:
            return
        state.combo.countdown = max(0.0, state.combo.countdown - dt)
        self.evaluate(state)

    def advance(self, state: DojoState) -> None:
        """Issue the next leg once the avatar has arrived; finish after the last."""
        combo = state.combo
        if combo.state is not ComboState.EXECUTING:
            return
        body, ninja = state.ninja()
        if not ninja.moving and combo.index < len(combo.path):
            move_to(ninja, body, combo.path[combo.index], state.config, unrestricted=True)
            combo.index += 1
        self.evaluate(state)

    def evaluate(self, state: DojoState) -> ComboState | None:
        """Fire the first transition whose guard holds. Returns the new state."""
        old = state.combo.state
        for guard_name, target in TRANSITIONS.get(old, ()):
            if self._guards.check(guard_name, state):
                self._enter(state, old, target)
                return target
        return None

    def _switch(self, state: DojoState, new: ComboState) -> None:
        old = state.combo.state
        state.combo.state = new
        logger.debug("combo %s -> %s", old.value, new.value)
        state.bus.publish("combo", old=old.value, new=new.value)

    def _enter(self, state: DojoState, old: ComboState, new: ComboState) -> None:
        combo = state.combo
        state.time_scale = 1.0

        if new is ComboState.EXECUTING:
            combo.path = list(combo.points)
            combo.points = []
            combo.index = 0
            self._switch(state, ComboState.EXECUTING)
            state.set_phase(Phase.PLAYING)
            self.advance(state)
            return

        self._switch(state, ComboState.INACTIVE)
        combo.points = []
        combo.countdown = 0.0
        if old is ComboState.EXECUTING:
            combo.path = []
            combo.index = 0
            _, ninja = state.ninja()
            ninja.glowing = False
            state.sushi_count = 0
            state.report_slots()
        if state.phase is Phase.SELECTING:
            state.set_phase(Phase.PLAYING)


def make_combo_system(controller: ComboController) -> System:
    """Advance combo execution after the entity updates of a playing frame."""

    def combo_system(state: DojoState, ctx: TickContext) -> None:
        controller.advance(state)

    return combo_system
