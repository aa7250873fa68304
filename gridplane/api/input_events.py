"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in render-target pixel coordinates.

    `event_type` is one of `pointer_down`, `pointer_up`, `pointer_leave`
    or `pointer_move`.
    """

    event_type: str
    x: float
    y: float
    button: int = 0


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Mouse wheel event in render-target pixel coordinates.

    Positive `dy` scrolls down (zooms out).
    """

    x: float
    y: float
    dy: float


POINTER_EVENT_TYPES: frozenset[str] = frozenset(
    {"pointer_down", "pointer_up", "pointer_leave", "pointer_move"}
)

__all__ = ["POINTER_EVENT_TYPES", "PointerEvent", "WheelEvent"]
