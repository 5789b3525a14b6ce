"""Presentation pass: hands read-only entity state to an external draw service."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tick_dojo.components import Body, Bomb, ComboPath, Ninja, Remnant, Shuriken, Sushi
from tick_dojo.types import Phase

if TYPE_CHECKING:
    from tick_dojo.config import DojoConfig
    from tick_dojo.state import DojoState


class RenderSink(Protocol):
    def draw_arena(self, config: DojoConfig) -> None: ...

    def draw_remnant(self, body: Body, remnant: Remnant) -> None: ...

    def draw_sushi(self, body: Body, sushi: Sushi) -> None: ...

    def draw_shuriken(self, body: Body, shuriken: Shuriken) -> None: ...

    def draw_bomb(self, body: Body, bomb: Bomb) -> None: ...

    def draw_ninja(self, body: Body, ninja: Ninja, executing: bool) -> None: ...

    def draw_visibility(self, center: tuple[float, float], diameter: float) -> None: ...

    def draw_combo_selection(self, body: Body, combo: ComboPath) -> None: ...


def present(state: DojoState, sink: RenderSink) -> None:
    """Draw one frame, back to front. Never mutates ``state``."""
    world = state.world
    sink.draw_arena(state.config)
    if not world.alive(state.ninja_id):
        return

    for _, (body, remnant) in world.query(Body, Remnant):
        sink.draw_remnant(body, remnant)
    for _, (body, sushi) in world.query(Body, Sushi):
        sink.draw_sushi(body, sushi)
    for _, (body, shuriken) in world.query(Body, Shuriken):
        sink.draw_shuriken(body, shuriken)
    for _, (body, bomb) in world.query(Body, Bomb):
        sink.draw_bomb(body, bomb)

    ninja_body, ninja = state.ninja()
    sink.draw_ninja(ninja_body, ninja, state.executing)

    if state.visibility < state.config.visibility_full:
        sink.draw_visibility(ninja_body.position, state.visibility)
    if state.phase is Phase.SELECTING:
        sink.draw_combo_selection(ninja_body, state.combo)
