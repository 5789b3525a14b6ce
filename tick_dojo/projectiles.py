"""Projectile flight, remnant fading and explosive hazards."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_dojo import vec
from tick_dojo.components import Body, Bomb, Remnant, Shuriken
from tick_dojo.config import DojoConfig
from tick_dojo.types import ShurikenKind
from tick_dojo.vec import Vec

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import EntityId, System, TickContext
    from tick_dojo.world import World

logger = logging.getLogger(__name__)


def spawn_remnant(world: World, position: Vec, kind: ShurikenKind, config: DojoConfig) -> EntityId:
    lifetime = config.remnant_lifetime
    return world.spawn(
        Body(position=position),
        Remnant(kind=kind, lifetime=lifetime, initial=lifetime),
    )


def arm_bomb(world: World, position: Vec, config: DojoConfig) -> EntityId:
    logger.debug("bomb armed at (%.1f, %.1f)", *position)
    return world.spawn(Body(position=position), Bomb(timer=config.bomb_fuse))


def steer_homing(body: Body, target: Vec, dt: float, config: DojoConfig) -> None:
    """Pull the velocity toward ``target``, then restore constant speed."""
    to_target = vec.sub(target, body.position)
    dist = vec.magnitude(to_target)
    if dist == 0.0:
        return
    pull = vec.scale(to_target, config.homing_pull * dt / dist)
    body.velocity = vec.with_magnitude(vec.add(body.velocity, pull), config.shuriken_speed)


def bounce(body: Body, config: DojoConfig) -> None:
    """Reflect off arena walls, only when moving into the wall being touched."""
    r = config.shuriken_radius
    (left, top), (right, bottom) = config.arena_min, config.arena_max
    x, y = body.position
    vx, vy = body.velocity

    if x - r < left and vx < 0:
        x, vx = left + r, abs(vx)
    if x + r > right and vx > 0:
        x, vx = right - r, -abs(vx)
    if y - r < top and vy < 0:
        y, vy = top + r, abs(vy)
    if y + r > bottom and vy > 0:
        y, vy = bottom - r, -abs(vy)

    body.position = (x, y)
    body.velocity = (vx, vy)


def step_shuriken(
    body: Body, shuriken: Shuriken, dt: float, config: DojoConfig, ninja_pos: Vec
) -> None:
    body.position = vec.add(body.position, vec.scale(body.velocity, dt))
    shuriken.rotation += config.shuriken_spin * dt

    if not shuriken.entered and config.inside_arena(body.position):
        shuriken.entered = True
    if shuriken.entered:
        shuriken.time_in_arena += dt

    if shuriken.kind is ShurikenKind.HOMING:
        steer_homing(body, ninja_pos, dt, config)

    if shuriken.entered:
        bounce(body, config)


def make_shuriken_system() -> System:
    """Move every live projectile on scaled time."""

    def shuriken_system(state: DojoState, ctx: TickContext) -> None:
        config = state.config
        ninja_pos = state.world.get(state.ninja_id, Body).position
        for _, (body, shuriken) in state.world.query(Body, Shuriken):
            step_shuriken(body, shuriken, ctx.scaled_dt, config, ninja_pos)

    return shuriken_system


def make_remnant_system() -> System:
    """Age remnants on raw frame time and drop the expired ones."""

    def remnant_system(state: DojoState, ctx: TickContext) -> None:
        world = state.world
        for eid, (remnant,) in world.query(Remnant):
            remnant.lifetime -= ctx.dt
            if remnant.lifetime <= 0.0:
                world.despawn(eid)

    return remnant_system


def detonate(state: DojoState, position: Vec, bomb: Bomb) -> None:
    """Blast everything within reach of ``position``.

    The avatar is tested first: if its body overlaps the blast the game ends
    on the score it had before the blast. Projectiles inside the blast
    radius are then destroyed for a point each.
    """
    config = state.config
    world = state.world
    bomb.exploded = True
    bomb.timer = 0.0

    ninja_pos = world.get(state.ninja_id, Body).position
    caught = vec.distance(ninja_pos, position) < config.blast_radius + config.ninja_radius
    if caught:
        state.game_over("blast")

    for eid, (body, shuriken) in world.query(Body, Shuriken):
        if vec.distance(body.position, position) < config.blast_radius:
            world.despawn(eid)
            state.award()
            if shuriken.kind is not ShurikenKind.EXPLOSIVE:
                spawn_remnant(world, body.position, shuriken.kind, config)
    state.bus.publish("detonation", position=position, caught=caught)


def make_bomb_system() -> System:
    """Count armed bombs down on scaled time; grow and fade blasts on raw time."""

    def bomb_system(state: DojoState, ctx: TickContext) -> None:
        config = state.config
        world = state.world
        for eid, (body, bomb) in world.query(Body, Bomb):
            if not bomb.exploded:
                bomb.timer -= ctx.scaled_dt
                if bomb.timer <= 0.0:
                    detonate(state, body.position, bomb)
                    if state.over:
                        return
            else:
                bomb.radius += config.blast_growth * ctx.dt
                bomb.opacity = max(0.0, bomb.opacity - config.blast_fade * ctx.dt)
            if bomb.opacity <= 0.0:
                world.despawn(eid)

    return bomb_system
