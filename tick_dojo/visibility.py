"""Visibility ("fog") controller driven by shadow projectiles."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_dojo.components import Shuriken
from tick_dojo.config import DojoConfig
from tick_dojo.types import ShurikenKind

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import System, TickContext
    from tick_dojo.world import World


def target_diameter(world: World, config: DojoConfig) -> float:
    """Narrowest diameter demanded by any shadow projectile inside the arena.

    Each one shrinks its demand linearly with time spent in the arena, from
    the start diameter down to the floor. Full visibility when none apply.
    """
    target = config.visibility_full
    for _, (shuriken,) in world.query(Shuriken):
        if shuriken.kind is not ShurikenKind.SHADOW or not shuriken.entered:
            continue
        demand = max(
            config.visibility_floor,
            config.visibility_start - shuriken.time_in_arena * config.visibility_shrink,
        )
        target = min(target, demand)
    return target


def approach(current: float, target: float, dt: float, config: DojoConfig) -> float:
    """Move ``current`` toward ``target``: slow to close, three times faster to open."""
    if target < current:
        return max(target, current - config.visibility_rate * dt)
    if target > current:
        rate = config.visibility_rate * config.visibility_recovery
        return min(target, current + rate * dt)
    return current


def make_visibility_system() -> System:
    """Recompute the visible diameter once per frame on raw frame time."""

    def visibility_system(state: DojoState, ctx: TickContext) -> None:
        config = state.config
        target = target_diameter(state.world, config)
        state.visibility = max(
            config.visibility_floor, approach(state.visibility, target, ctx.dt, config)
        )

    return visibility_system
