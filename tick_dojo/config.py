"""Dojo configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass, fields

from tick_dojo.types import ShurikenKind
from tick_dojo.vec import Vec


@dataclass(frozen=True)
class DojoConfig:
    """Immutable tuning for one dojo session.

    Distances are in arena pixels, rates per second. The canvas is the arena
    plus a spawn margin on every side; all positions are canvas coordinates.

    Attributes:
        arena_width: Width of the bounded play area.
        arena_height: Height of the bounded play area.
        margin: Visible band around the arena where projectiles appear.
        ninja_radius: Avatar body radius.
        ninja_speed: Avatar travel speed in normal play.
        combo_speed: Avatar travel speed while executing a combo path.
        swing_radius: Reach of the blade, measured from the avatar centre.
        move_range: Maximum distance of a normal (restricted) move.
        arrive_epsilon: Distance under which the avatar snaps to its target.
        combo_tap_slack: Extra radius around the avatar that counts as a tap on it.
        shuriken_radius: Projectile radius.
        shuriken_speed: Constant projectile speed.
        homing_pull: Steering acceleration of homing projectiles.
        spawn_spread: Total angular spread of the initial heading.
        visibility_floor: Smallest visible diameter.
        max_frame_dt: Cap on a single frame delta.
    """

    arena_width: float = 560.0
    arena_height: float = 375.0
    margin: float = 60.0

    ninja_radius: float = 15.0
    ninja_speed: float = 375.0
    combo_speed: float = 280.0
    swing_radius: float = 50.0
    sword_length: float = 35.0
    move_range: float = 120.0
    arrive_epsilon: float = 5.0
    combo_tap_slack: float = 20.0
    glow_rate: float = 5.0

    shuriken_radius: float = 14.0
    shuriken_speed: float = 120.0
    shuriken_spin: float = 10.0
    spawn_inset: float = 5.0
    spawn_spread: float = math.pi * 0.33
    homing_pull: float = 100.0

    homing_unlock: float = 0.0
    explosive_unlock: float = 20.0
    shadow_unlock: float = 45.0
    common_weight: float = 50.0
    homing_weight: float = 30.0
    explosive_weight: float = 15.0
    shadow_weight: float = 5.0

    spawn_interval_start: float = 1.5
    spawn_interval_floor: float = 0.2
    spawn_interval_decay: float = 1.0 / 30.0
    first_spawn_delay: float = 1.0

    sushi_radius: float = 7.0
    sushi_padding: float = 30.0
    sushi_cap: int = 3
    sushi_bob_rate: float = 3.0
    first_sushi_delay: float = 3.0
    sushi_delay_min: float = 5.0
    sushi_delay_max: float = 15.0

    remnant_lifetime: float = 2.0
    bomb_fuse: float = 2.0
    blast_radius: float = 50.0
    blast_growth: float = 300.0
    blast_fade: float = 2.0

    visibility_full_factor: float = 1.5
    visibility_start_factor: float = 1.2
    visibility_shrink: float = 40.0
    visibility_floor: float = 80.0
    visibility_rate: float = 200.0
    visibility_recovery: float = 3.0

    combo_countdown: float = 4.0
    combo_time_scale: float = 0.1
    combo_max_points: int = 3

    max_frame_dt: float = 0.1

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith(("_unlock", "_weight")):
                if value < 0:
                    raise ValueError(f"{f.name} must be non-negative")
            elif value <= 0:
                raise ValueError(f"{f.name} must be positive")
        if self.spawn_interval_floor > self.spawn_interval_start:
            raise ValueError("spawn_interval_floor must not exceed spawn_interval_start")
        if self.sushi_delay_min > self.sushi_delay_max:
            raise ValueError("sushi_delay_min must not exceed sushi_delay_max")
        if self.visibility_floor > self.visibility_start:
            raise ValueError("visibility_floor must not exceed the shadow start diameter")
        if 2 * self.sushi_padding >= min(self.arena_width, self.arena_height):
            raise ValueError("sushi_padding leaves no room inside the arena")

    @property
    def canvas_width(self) -> float:
        return self.arena_width + self.margin * 2

    @property
    def canvas_height(self) -> float:
        return self.arena_height + self.margin * 2

    @property
    def arena_min(self) -> Vec:
        return (self.margin, self.margin)

    @property
    def arena_max(self) -> Vec:
        return (self.margin + self.arena_width, self.margin + self.arena_height)

    @property
    def center(self) -> Vec:
        return (self.canvas_width / 2, self.canvas_height / 2)

    @property
    def arena_center(self) -> Vec:
        return (self.margin + self.arena_width / 2, self.margin + self.arena_height / 2)

    @property
    def visibility_full(self) -> float:
        return self.canvas_width * self.visibility_full_factor

    @property
    def visibility_start(self) -> float:
        return self.canvas_width * self.visibility_start_factor

    def unlock_time(self, kind: ShurikenKind) -> float:
        return {
            ShurikenKind.COMMON: 0.0,
            ShurikenKind.HOMING: self.homing_unlock,
            ShurikenKind.EXPLOSIVE: self.explosive_unlock,
            ShurikenKind.SHADOW: self.shadow_unlock,
        }[kind]

    def weight(self, kind: ShurikenKind) -> float:
        return {
            ShurikenKind.COMMON: self.common_weight,
            ShurikenKind.HOMING: self.homing_weight,
            ShurikenKind.EXPLOSIVE: self.explosive_weight,
            ShurikenKind.SHADOW: self.shadow_weight,
        }[kind]

    def ninja_bounds(self) -> tuple[Vec, Vec]:
        """Corners of the rectangle the avatar centre must stay inside."""
        r = self.ninja_radius
        lo = self.arena_min
        hi = self.arena_max
        return (lo[0] + r, lo[1] + r), (hi[0] - r, hi[1] - r)

    def inside_arena(self, p: Vec) -> bool:
        lo = self.arena_min
        hi = self.arena_max
        return lo[0] <= p[0] <= hi[0] and lo[1] <= p[1] <= hi[1]
