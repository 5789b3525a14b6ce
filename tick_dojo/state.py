"""Session context shared by every system in a frame."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tick_dojo.clock import format_clock
from tick_dojo.components import Body, ComboPath, Ninja
from tick_dojo.config import DojoConfig
from tick_dojo.signals import SignalBus
from tick_dojo.types import ComboState, EntityId, Phase
from tick_dojo.world import World

logger = logging.getLogger(__name__)


@dataclass
class DojoState:
    """Everything one session owns. Replaced wholesale on restart.

    Systems receive this object instead of reaching for module globals.
    """

    config: DojoConfig
    world: World = field(default_factory=World)
    bus: SignalBus = field(default_factory=SignalBus)
    phase: Phase = Phase.IDLE
    score: int = 0
    elapsed: float = 0.0
    time_scale: float = 1.0
    visibility: float = 0.0
    sushi_count: int = 0
    ninja_id: EntityId = -1
    combo: ComboPath = field(default_factory=ComboPath)
    shuriken_timer: float = 0.0
    sushi_timer: float = 0.0

    def __post_init__(self) -> None:
        if self.visibility <= 0.0:
            self.visibility = self.config.visibility_full

    @property
    def executing(self) -> bool:
        return self.combo.state is ComboState.EXECUTING

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER

    def ninja(self) -> tuple[Body, Ninja]:
        world = self.world
        return world.get(self.ninja_id, Body), world.get(self.ninja_id, Ninja)

    def set_phase(self, phase: Phase) -> None:
        old = self.phase
        if old is phase:
            return
        self.phase = phase
        self.bus.publish("phase", old=old.value, new=phase.value)

    def award(self, points: int = 1) -> None:
        self.score += points
        self.bus.publish("score", score=self.score)

    def report_slots(self) -> None:
        self.sushi_count = max(0, min(self.sushi_count, self.config.sushi_cap))
        self.bus.publish("power_slots", count=self.sushi_count)

    def game_over(self, cause: str) -> bool:
        """Enter the terminal phase. Returns False if already there."""
        if self.phase is Phase.OVER:
            return False
        self.set_phase(Phase.OVER)
        text = format_clock(self.elapsed)
        logger.info("game over (%s): score=%d time=%s", cause, self.score, text)
        self.bus.publish(
            "game_over", score=self.score, elapsed=self.elapsed, text=text, cause=cause
        )
        return True
