"""Per-frame collision resolution between the avatar and everything else."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_dojo import vec
from tick_dojo.components import Body, Shuriken, Sushi
from tick_dojo.ninja import in_front_arc, is_behind
from tick_dojo.projectiles import arm_bomb, spawn_remnant
from tick_dojo.types import ShurikenKind

if TYPE_CHECKING:
    from tick_dojo.state import DojoState
    from tick_dojo.types import EntityId, System, TickContext

logger = logging.getLogger(__name__)


def deflect(state: DojoState, eid: EntityId, body: Body, shuriken: Shuriken) -> None:
    """Block outcome: score a point and replace the projectile.

    Explosives become armed bombs; everything else leaves a fading remnant.
    """
    world = state.world
    world.despawn(eid)
    state.award()
    if shuriken.kind is ShurikenKind.EXPLOSIVE:
        arm_bomb(world, body.position, state.config)
    else:
        spawn_remnant(world, body.position, shuriken.kind, state.config)
    logger.debug("deflected %s shuriken", shuriken.kind.value)
    state.bus.publish("deflect", kind=shuriken.kind.value, position=body.position)


def collect_sushi(state: DojoState) -> int:
    """Pick up every collectible touching the avatar. Returns how many."""
    config = state.config
    world = state.world
    ninja_body, ninja = state.ninja()
    reach = config.ninja_radius + config.sushi_radius
    collected = 0
    for eid, (body, _) in world.query(Body, Sushi):
        if vec.distance(ninja_body.position, body.position) >= reach:
            continue
        world.despawn(eid)
        collected += 1
        if state.sushi_count < config.sushi_cap:
            state.sushi_count += 1
            state.report_slots()
            if state.sushi_count >= config.sushi_cap and not ninja.glowing:
                ninja.glowing = True
                logger.debug("combo ready")
    return collected


def resolve_shurikens(state: DojoState) -> None:
    """Block, kill or ignore each live projectile against the avatar.

    Stops at the first kill; the frame is frozen from then on.
    """
    config = state.config
    ninja_body, ninja = state.ninja()
    armed = ninja.moving or state.executing
    contact = config.ninja_radius + config.shuriken_radius
    reach = config.swing_radius + config.shuriken_radius
    r = config.shuriken_radius

    for eid, (body, shuriken) in state.world.query(Body, Shuriken):
        point = body.position
        dist = vec.distance(ninja_body.position, point)

        if dist < contact:
            if not armed:
                state.game_over("hit while standing")
                return
            if in_front_arc(ninja, ninja_body, point, r, config):
                deflect(state, eid, body, shuriken)
                continue
            if is_behind(ninja, ninja_body, point):
                state.game_over("hit from behind")
                return

        if armed and dist < reach and in_front_arc(ninja, ninja_body, point, r, config):
            deflect(state, eid, body, shuriken)


def make_resolver_system() -> System:
    """Collectibles first, then projectiles."""

    def resolver_system(state: DojoState, ctx: TickContext) -> None:
        collect_sushi(state)
        resolve_shurikens(state)

    return resolver_system
