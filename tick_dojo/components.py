"""Entity components. Plain dataclasses, no behavior.

Every entity carries a ``Body`` plus exactly one kind component; the kind
component is what systems and the presentation pass dispatch on.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_dojo.types import ComboState, ShurikenKind
from tick_dojo.vec import Vec


@dataclass
class Body:
    """Position and velocity in canvas coordinates."""

    position: Vec
    velocity: Vec = (0.0, 0.0)


@dataclass
class Ninja:
    """The player avatar.

    ``swing`` runs 0..1 over a normal move (the blade sweeps twice as fast
    as the body travels) and 0..2 per leg during combo execution.
    """

    target: Vec
    start: Vec
    angle: float = 0.0
    moving: bool = False
    glowing: bool = False
    glow_phase: float = 0.0
    swing: float = 0.0


@dataclass
class Shuriken:
    kind: ShurikenKind = ShurikenKind.COMMON
    rotation: float = 0.0
    time_in_arena: float = 0.0
    entered: bool = False


@dataclass
class Remnant:
    """Fading image of a destroyed projectile."""

    kind: ShurikenKind
    lifetime: float
    initial: float

    @property
    def opacity(self) -> float:
        return max(0.0, self.lifetime / self.initial)


@dataclass
class Bomb:
    """Deflected explosive: armed countdown, then an expanding blast."""

    timer: float
    exploded: bool = False
    radius: float = 0.0
    opacity: float = 1.0


@dataclass
class Sushi:
    """Collectible power item. ``bob`` is cosmetic."""

    bob: float = 0.0


@dataclass
class ComboPath:
    """Combo controller state: selection points, then the legs being executed."""

    state: ComboState = ComboState.INACTIVE
    points: list[Vec] = field(default_factory=list)
    path: list[Vec] = field(default_factory=list)
    index: int = 0
    countdown: float = 0.0
