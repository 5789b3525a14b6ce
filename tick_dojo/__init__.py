"""tick-dojo - A deflect-and-survive arcade simulation on a tick-style entity world."""

from tick_dojo.config import DojoConfig
from tick_dojo.render import RenderSink, present
from tick_dojo.session import Session
from tick_dojo.signals import SignalBus, attach_ui
from tick_dojo.state import DojoState
from tick_dojo.types import (
    ComboState,
    DeadEntityError,
    EntityId,
    Phase,
    ShurikenKind,
    TickContext,
    UISink,
)
from tick_dojo.world import World

__all__ = [
    "Session",
    "DojoConfig",
    "DojoState",
    "World",
    "SignalBus",
    "attach_ui",
    "present",
    "RenderSink",
    "UISink",
    "Phase",
    "ComboState",
    "ShurikenKind",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
