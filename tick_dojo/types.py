"""Shared type aliases, enums and protocols for the dojo simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Protocol

EntityId = int


class Phase(str, Enum):
    """Session state tag."""

    IDLE = "idle"
    PLAYING = "playing"
    SELECTING = "selecting"
    OVER = "over"


class ComboState(str, Enum):
    """Combo-path controller state."""

    INACTIVE = "inactive"
    SELECTING = "selecting"
    EXECUTING = "executing"


class ShurikenKind(str, Enum):
    """Projectile variants, listed in unlock order."""

    COMMON = "common"
    HOMING = "homing"
    EXPLOSIVE = "explosive"
    SHADOW = "shadow"


@dataclass(frozen=True, slots=True)
class TickContext:
    frame: int
    dt: float
    scaled_dt: float
    time_scale: float
    elapsed: float
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class UISink(Protocol):
    def report_score(self, score: int) -> None: ...

    def report_time(self, text: str) -> None: ...

    def report_power_slots(self, count: int) -> None: ...

    def report_game_over(self, score: int, text: str) -> None: ...


if TYPE_CHECKING:
    from tick_dojo.state import DojoState

System = Callable[["DojoState", TickContext], None]
