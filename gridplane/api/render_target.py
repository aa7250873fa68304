"""Render target and frame scheduler contracts consumed by the engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from gridplane.api.objects import TextAlignment

FrameCallback = Callable[[], None]


class RenderTarget(Protocol):
    """Minimal 2D raster drawing surface.

    Pixel origin is top-left with y increasing downward. Path calls build a
    single current path that `fill`/`stroke` paint.
    """

    @property
    def width(self) -> float:
        """Current pixel width."""

    @property
    def height(self) -> float:
        """Current pixel height."""

    def begin_frame(self) -> None:
        """Prepare frame-local drawing state."""

    def end_frame(self) -> None:
        """Finalize and present the frame."""

    def set_fill_colour(self, colour: str) -> None: ...

    def set_stroke_colour(self, colour: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        """Append a clockwise arc in raster space; angles are radians."""

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def draw_image(
        self,
        image: Any,
        x: float,
        y: float,
        width: float,
        height: float,
        rotation: float | None = None,
    ) -> None:
        """Draw `image` into a rectangle, rotated clockwise about its centre."""

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        alignment: TextAlignment,
        font: str,
        font_size: float,
    ) -> None:
        """Draw text with a vertically centred baseline using the fill colour."""


class FrameScheduler(Protocol):
    """Host hook invoking a callback once before the next display refresh."""

    def __call__(self, callback: FrameCallback) -> None: ...


__all__ = ["FrameCallback", "FrameScheduler", "RenderTarget"]
