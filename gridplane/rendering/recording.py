"""In-memory render target that records every drawing call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridplane.api.objects import TextAlignment


@dataclass(frozen=True, slots=True)
class DrawCall:
    """One recorded render-target call."""

    op: str
    args: tuple[Any, ...] = ()


@dataclass(slots=True)
class RecordingTarget:
    """Render target for headless hosts; keeps the calls of the latest frame.

    `frames` counts completed frames. `calls` is cleared at the start of each
    frame so it always holds the most recent full redraw.
    """

    width: float = 400.0
    height: float = 300.0
    calls: list[DrawCall] = field(default_factory=list)
    frames: int = 0

    def begin_frame(self) -> None:
        self.calls.clear()

    def end_frame(self) -> None:
        self.frames += 1

    def ops(self) -> list[str]:
        return [call.op for call in self.calls]

    def calls_named(self, op: str) -> list[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def _record(self, op: str, *args: Any) -> None:
        self.calls.append(DrawCall(op, args))

    def set_fill_colour(self, colour: str) -> None:
        self._record("set_fill_colour", colour)

    def set_stroke_colour(self, colour: str) -> None:
        self._record("set_stroke_colour", colour)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        self._record("arc", cx, cy, radius, start, end)

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("fill_rect", x, y, width, height)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("stroke_rect", x, y, width, height)

    def draw_image(
        self,
        image: Any,
        x: float,
        y: float,
        width: float,
        height: float,
        rotation: float | None = None,
    ) -> None:
        self._record("draw_image", image, x, y, width, height, rotation)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        alignment: TextAlignment,
        font: str,
        font_size: float,
    ) -> None:
        self._record("draw_text", text, x, y, alignment, font, font_size)


__all__ = ["DrawCall", "RecordingTarget"]
