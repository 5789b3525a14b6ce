"""Avatar movement, blade swing and the front/behind hit predicates."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tick_dojo import vec
from tick_dojo.components import Body, Ninja
from tick_dojo.config import DojoConfig
from tick_dojo.vec import Vec

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import System, TickContext

_HALF_PI = math.pi / 2


def spawn_ninja(state: DojoState) -> int:
    """Create the avatar at the canvas centre."""
    center = state.config.center
    eid = state.world.spawn(Body(position=center), Ninja(target=center, start=center))
    state.ninja_id = eid
    return eid


def move_to(
    ninja: Ninja,
    body: Body,
    point: Vec,
    config: DojoConfig,
    *,
    unrestricted: bool = False,
) -> Vec:
    """Start a move toward ``point`` and return the clamped destination.

    Restricted moves stop at ``move_range`` from the current position.
    Every destination is clamped into the arena inset by the body radius.
    """
    origin = body.position
    offset = vec.sub(point, origin)
    if not unrestricted:
        offset = vec.clamp_magnitude(offset, config.move_range)
    lo, hi = config.ninja_bounds()
    target = vec.clamp_to_rect(vec.add(origin, offset), lo, hi)

    ninja.start = origin
    ninja.target = target
    if target != origin:
        ninja.angle = vec.heading(origin, target)
    ninja.moving = True
    ninja.swing = 0.0
    return target


def step_ninja(
    ninja: Ninja,
    body: Body,
    dt: float,
    config: DojoConfig,
    *,
    executing: bool = False,
) -> bool:
    """Advance the avatar by ``dt``. Returns True on the frame it arrives."""
    if ninja.glowing:
        ninja.glow_phase += dt * config.glow_rate
    if not ninja.moving:
        return False

    to_target = vec.sub(ninja.target, body.position)
    dist = vec.magnitude(to_target)
    if dist < config.arrive_epsilon:
        body.position = ninja.target
        ninja.moving = False
        ninja.swing = 0.0
        return True

    speed = config.combo_speed if executing else config.ninja_speed
    travel = min(speed * dt, dist)
    body.position = vec.add(body.position, vec.scale(to_target, travel / dist))

    total = vec.distance(ninja.start, ninja.target)
    if total > 0.0:
        progress = vec.distance(ninja.start, body.position) / total * 2.0
        ninja.swing = progress if executing else min(1.0, progress)
    return False


def bearing_offset(ninja: Ninja, origin: Vec, point: Vec) -> float:
    """Absolute angle between the facing direction and the bearing to ``point``.

    A point on the avatar centre has no bearing and reads as dead ahead.
    """
    if point == origin:
        return 0.0
    return abs(vec.wrap_angle(vec.heading(origin, point) - ninja.angle))


def in_front_sector(ninja: Ninja, origin: Vec, point: Vec) -> bool:
    return bearing_offset(ninja, origin, point) < _HALF_PI


def in_front_arc(
    ninja: Ninja, body: Body, point: Vec, radius: float, config: DojoConfig
) -> bool:
    """True when ``point`` is inside blade reach and within 90 degrees of facing."""
    if vec.distance(body.position, point) > config.swing_radius + radius:
        return False
    return in_front_sector(ninja, body.position, point)


def is_behind(ninja: Ninja, body: Body, point: Vec) -> bool:
    """True when ``point`` is 90 degrees or more off the facing direction."""
    return not in_front_sector(ninja, body.position, point)


def make_ninja_system() -> System:
    """Integrate the avatar on scaled time."""

    def ninja_system(state: DojoState, ctx: TickContext) -> None:
        body, ninja = state.ninja()
        step_ninja(ninja, body, ctx.scaled_dt, state.config, executing=state.executing)

    return ninja_system
