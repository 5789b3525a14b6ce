"""Spawn director: projectile mix and pacing, collectible placement."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING

from tick_dojo import vec
from tick_dojo.components import Body, Shuriken, Sushi
from tick_dojo.config import DojoConfig
from tick_dojo.types import ShurikenKind
from tick_dojo.vec import Vec

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import EntityId, System, TickContext
    from tick_dojo.world import World

logger = logging.getLogger(__name__)

# Unlock order; also the order weights are walked in.
KIND_ORDER = (
    ShurikenKind.COMMON,
    ShurikenKind.HOMING,
    ShurikenKind.EXPLOSIVE,
    ShurikenKind.SHADOW,
)

EDGES = ("top", "right", "bottom", "left")


class SpawnDirector:
    """Decides what spawns, where, and when. Owns no entities."""

    def __init__(self, config: DojoConfig, rng: random.Random) -> None:
        self._config = config
        self._rng = rng

    @property
    def config(self) -> DojoConfig:
        return self._config

    def available(self, elapsed: float) -> list[ShurikenKind]:
        return [k for k in KIND_ORDER if elapsed >= self._config.unlock_time(k)]

    def next_kind(self, elapsed: float) -> ShurikenKind:
        """Weighted draw over the kinds unlocked at ``elapsed``."""
        kinds = self.available(elapsed)
        total = sum(self._config.weight(k) for k in kinds)
        if total <= 0.0:
            return ShurikenKind.COMMON
        roll = self._rng.random() * total
        for kind in kinds:
            roll -= self._config.weight(kind)
            if roll <= 0.0:
                return kind
        return kinds[-1]

    def interval(self, elapsed: float) -> float:
        """Delay until the next projectile; shrinks linearly to a floor."""
        cfg = self._config
        return max(
            cfg.spawn_interval_floor,
            cfg.spawn_interval_start - elapsed * cfg.spawn_interval_decay,
        )

    def edge_point(self, edge: str) -> Vec:
        """A point in the margin band just outside ``edge`` of the arena."""
        cfg = self._config
        inset = cfg.shuriken_radius + cfg.spawn_inset
        along_x = cfg.margin + self._rng.random() * cfg.arena_width
        along_y = cfg.margin + self._rng.random() * cfg.arena_height
        if edge == "top":
            return (along_x, inset)
        if edge == "right":
            return (cfg.canvas_width - inset, along_y)
        if edge == "bottom":
            return (along_x, cfg.canvas_height - inset)
        if edge == "left":
            return (inset, along_y)
        raise ValueError(f"Unknown edge {edge!r}")

    def launch_velocity(self, origin: Vec) -> Vec:
        """Aim at the arena centre, deviated by up to half the spread."""
        cfg = self._config
        heading = vec.normalize(vec.sub(cfg.arena_center, origin))
        deviation = (self._rng.random() - 0.5) * cfg.spawn_spread
        return vec.scale(vec.rotate(heading, deviation), cfg.shuriken_speed)

    def spawn_shuriken(
        self, world: World, elapsed: float, kind: ShurikenKind | None = None
    ) -> EntityId:
        if kind is None:
            kind = self.next_kind(elapsed)
        edge = self._rng.choice(EDGES)
        origin = self.edge_point(edge)
        velocity = self.launch_velocity(origin)
        logger.debug("spawn %s shuriken on %s edge at t=%.2f", kind.value, edge, elapsed)
        return world.spawn(Body(position=origin, velocity=velocity), Shuriken(kind=kind))

    def sushi_point(self) -> Vec:
        cfg = self._config
        pad = cfg.sushi_padding
        return (
            cfg.margin + pad + self._rng.random() * (cfg.arena_width - pad * 2),
            cfg.margin + pad + self._rng.random() * (cfg.arena_height - pad * 2),
        )

    def spawn_sushi(self, world: World) -> EntityId:
        point = self.sushi_point()
        logger.debug("spawn sushi at (%.1f, %.1f)", *point)
        return world.spawn(Body(position=point), Sushi(bob=self._rng.random() * math.tau))

    def sushi_delay(self) -> float:
        cfg = self._config
        return self._rng.uniform(cfg.sushi_delay_min, cfg.sushi_delay_max)


def make_spawn_system(director: SpawnDirector) -> System:
    """Tick both spawn timers and spawn whatever is due.

    The projectile timer runs on scaled time; the collectible timer runs on
    raw frame time and holds at zero while the collectible cap is reached.
    """

    def spawn_system(state: DojoState, ctx: TickContext) -> None:
        world = state.world
        state.shuriken_timer -= ctx.scaled_dt
        if state.shuriken_timer <= 0.0:
            director.spawn_shuriken(world, state.elapsed)
            state.shuriken_timer = director.interval(state.elapsed)

        state.sushi_timer = max(0.0, state.sushi_timer - ctx.dt)
        if state.sushi_timer <= 0.0 and world.count(Sushi) < state.config.sushi_cap:
            director.spawn_sushi(world)
            state.sushi_timer = director.sushi_delay()

    return spawn_system


def make_sushi_system() -> System:
    def sushi_system(state: DojoState, ctx: TickContext) -> None:
        rate = state.config.sushi_bob_rate
        for _, (sushi,) in state.world.query(Sushi):
            sushi.bob += ctx.dt * rate

    return sushi_system
