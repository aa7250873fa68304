"""Pointer drag and wheel input mapped onto pan and zoom."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from gridplane.api.input_events import POINTER_EVENT_TYPES, PointerEvent, WheelEvent
from gridplane.runtime.config import DEFAULT_WHEEL_ZOOM_RATE

logger = logging.getLogger(__name__)

MIN_WHEEL_ZOOM_FACTOR = -0.9


class PanZoomTarget(Protocol):
    """Engine surface the controller drives."""

    def to_real(self, px: float, py: float) -> tuple[float, float]: ...

    def pan(self, dx: float, dy: float) -> bool: ...

    def zoom_at(self, factor: float, px: float, py: float) -> bool: ...


class InputController:
    """Translate pointer and wheel events into pan/zoom calls.

    Enable flags and vetoes live on the engine settings and are checked by
    the engine when the call arrives.
    """

    def __init__(self, target: PanZoomTarget, *, wheel_zoom_rate: float = DEFAULT_WHEEL_ZOOM_RATE) -> None:
        self._target = target
        self._wheel_zoom_rate = wheel_zoom_rate
        self._pressed = False
        self._prev_pos: tuple[float, float] | None = None

    @property
    def pressed(self) -> bool:
        return self._pressed

    @property
    def pointer_position(self) -> tuple[float, float] | None:
        return self._prev_pos

    def bind(self, canvas: Any) -> None:
        """Attach listeners to a canvas exposing `add_event_handler`."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        for event_type in sorted(POINTER_EVENT_TYPES):
            canvas.add_event_handler(self._on_pointer, event_type)
        canvas.add_event_handler(self._on_wheel, "wheel")

    def handle_event(self, event: PointerEvent | WheelEvent) -> None:
        if isinstance(event, WheelEvent):
            self.handle_wheel(event)
        else:
            self.handle_pointer(event)

    def handle_pointer(self, event: PointerEvent) -> None:
        kind = event.event_type
        if kind == "pointer_down":
            self._pressed = True
        elif kind in ("pointer_up", "pointer_leave"):
            self._pressed = False
        elif kind == "pointer_move":
            self._on_move(event.x, event.y)
        else:
            logger.debug("input_event_ignored type=%s", kind)

    def handle_wheel(self, event: WheelEvent) -> None:
        factor = max(MIN_WHEEL_ZOOM_FACTOR, self._wheel_zoom_rate * -event.dy)
        if factor == 0.0:
            return
        self._target.zoom_at(factor, event.x, event.y)

    def _on_move(self, x: float, y: float) -> None:
        prev = self._prev_pos
        self._prev_pos = (x, y)
        if not self._pressed or prev is None:
            return
        # Both points go through the same, pre-pan transform.
        current_real = self._target.to_real(x, y)
        prev_real = self._target.to_real(*prev)
        self._target.pan(current_real[0] - prev_real[0], current_real[1] - prev_real[1])

    def _on_pointer(self, event: dict[str, Any]) -> None:
        event_type = event.get("event_type")
        if event_type not in POINTER_EVENT_TYPES:
            return
        x = event.get("x")
        y = event.get("y")
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            if event_type != "pointer_leave":
                return
            x, y = self._prev_pos or (0.0, 0.0)
        button = event.get("button")
        self.handle_pointer(
            PointerEvent(str(event_type), float(x), float(y), button if isinstance(button, int) else 0)
        )

    def _on_wheel(self, event: dict[str, Any]) -> None:
        if event.get("event_type") != "wheel":
            return
        x = event.get("x")
        y = event.get("y")
        dy = event.get("dy")
        if (
            not isinstance(x, (int, float))
            or not isinstance(y, (int, float))
            or not isinstance(dy, (int, float))
        ):
            return
        self.handle_wheel(WheelEvent(float(x), float(y), float(dy)))


__all__ = ["InputController", "MIN_WHEEL_ZOOM_FACTOR", "PanZoomTarget"]
