"""In-process signal bus with per-frame flush, plus the UI sink bridge."""
from __future__ import annotations

from typing import Any, Callable

from tick_dojo.types import UISink

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queue signals during a frame; deliver them in order on ``flush``.

    Handlers that publish while being flushed land in the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def attach_ui(bus: SignalBus, sink: UISink) -> None:
    """Route score, time, power-slot and game-over signals to ``sink``."""

    def _score(signal: str, data: dict[str, Any]) -> None:
        sink.report_score(data["score"])

    def _time(signal: str, data: dict[str, Any]) -> None:
        sink.report_time(data["text"])

    def _slots(signal: str, data: dict[str, Any]) -> None:
        sink.report_power_slots(data["count"])

    def _over(signal: str, data: dict[str, Any]) -> None:
        sink.report_game_over(data["score"], data["text"])

    bus.subscribe("score", _score)
    bus.subscribe("time", _time)
    bus.subscribe("power_slots", _slots)
    bus.subscribe("game_over", _over)
