"""Full-scene renderer: background, gridlines, axes, then objects by z."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, assert_never

from gridplane.api.objects import (
    CircleData,
    FunctionData,
    GridObject,
    ImageData,
    LineData,
    ShapeData,
    TextData,
)
from gridplane.api.render_target import RenderTarget
from gridplane.api.settings import GridSettings, GridlineTier

if TYPE_CHECKING:
    from gridplane.runtime.scene import Scene
    from gridplane.runtime.transform import CoordinateTransform


class GridRenderer:
    """Draw a scene through a transform onto a render target.

    Read-only with respect to scene, transform and settings.
    """

    def __init__(
        self,
        *,
        scene: Scene,
        transform: CoordinateTransform,
        settings: GridSettings,
    ) -> None:
        self._scene = scene
        self._transform = transform
        self._settings = settings

    def redraw(self, target: RenderTarget) -> int:
        """Repaint everything; returns the number of objects drawn."""
        settings = self._settings
        width, height = target.width, target.height
        target.begin_frame()
        try:
            target.set_fill_colour(settings.background_colour)
            target.fill_rect(0.0, 0.0, width, height)
            target.set_stroke_colour(settings.border.colour)
            target.set_line_width(settings.border.width)
            target.stroke_rect(0.0, 0.0, width, height)

            for tier in settings.grid_lines.tiers():
                self.draw_gridlines(target, tier)
            if settings.axes.enabled:
                self.draw_axes(target)

            drawn = 0
            for obj in self._scene.draw_order():
                if obj.style.hidden:
                    continue
                self.draw_object(target, obj)
                drawn += 1
        finally:
            target.end_frame()
        return drawn

    def draw_gridlines(self, target: RenderTarget, tier: GridlineTier) -> None:
        """Draw lines at every multiple of `tier.spacing` inside the viewport."""
        left, top, right, bottom = self._transform.visible_bounds()
        width, height = target.width, target.height
        spacing = tier.spacing
        target.set_stroke_colour(tier.colour)
        target.set_line_width(tier.width)
        target.begin_path()
        for k in range(math.ceil(left / spacing), math.floor(right / spacing) + 1):
            px, _ = self._transform.to_pixel(k * spacing, 0.0)
            target.move_to(px, 0.0)
            target.line_to(px, height)
        for k in range(math.ceil(bottom / spacing), math.floor(top / spacing) + 1):
            _, py = self._transform.to_pixel(0.0, k * spacing)
            target.move_to(0.0, py)
            target.line_to(width, py)
        target.stroke()

    def draw_axes(self, target: RenderTarget) -> None:
        """Draw x=0 and y=0, each only when it falls inside the target."""
        axes = self._settings.axes
        width, height = target.width, target.height
        x, y = self._transform.to_pixel(0.0, 0.0)
        show_x_axis = 0.0 <= y <= height
        show_y_axis = 0.0 <= x <= width
        if not (show_x_axis or show_y_axis):
            return
        target.set_stroke_colour(axes.colour)
        target.set_line_width(axes.width)
        target.begin_path()
        if show_x_axis:
            target.move_to(0.0, y)
            target.line_to(width, y)
        if show_y_axis:
            target.move_to(x, 0.0)
            target.line_to(x, height)
        target.stroke()

    def draw_object(self, target: RenderTarget, obj: GridObject) -> None:
        style = obj.style
        target.set_fill_colour(style.colour)
        target.set_stroke_colour(style.colour)
        data = obj.data
        if isinstance(data, TextData):
            x, y = self._transform.to_pixel(data.x, data.y)
            target.draw_text(data.text, x, y, data.alignment, style.font, style.font_size)
            return
        if isinstance(data, ImageData):
            self._draw_image(target, data)
            return

        target.begin_path()
        if isinstance(data, ShapeData):
            self._trace_shape(target, data)
        elif isinstance(data, CircleData):
            x, y = self._transform.to_pixel(data.x, data.y)
            radius = data.radius / self._transform.units_to_pixels()
            target.arc(x, y, radius, 0.0, 2.0 * math.pi)
        elif isinstance(data, FunctionData):
            self._trace_function(target, data)
        elif isinstance(data, LineData):
            self._trace_line(target, data)
        else:
            assert_never(data)

        if style.fill:
            target.fill()
        else:
            target.set_line_width(style.line_width)
            target.stroke()

    def _trace_shape(self, target: RenderTarget, data: ShapeData) -> None:
        first = self._transform.to_pixel(*data.points[0])
        target.move_to(*first)
        for point in data.points[1:]:
            target.line_to(*self._transform.to_pixel(*point))
        target.line_to(*first)

    def _trace_function(self, target: RenderTarget, data: FunctionData) -> None:
        """Sample the domain; undefined samples split the curve into subpaths."""
        start, end = data.domain.interval
        f = data.function
        if data.domain.integer_points_only:
            start = float(math.ceil(start))
            end = float(math.floor(end))
            step = 1.0
        else:
            step = self._settings.delta

        pen_down = False
        last_t: float | None = None
        i = 0
        t = start
        while t <= end:
            pen_down = self._plot_sample(target, f(t), pen_down)
            last_t = t
            i += 1
            t = start + i * step

        if not data.domain.integer_points_only and last_t != end:
            self._plot_sample(target, f(end), pen_down)

    def _plot_sample(self, target: RenderTarget, sample: Any, pen_down: bool) -> bool:
        if sample is None or sample[1] is None or math.isnan(sample[1]):
            return False
        x, y = self._transform.to_pixel(sample[0], sample[1])
        if pen_down:
            target.line_to(x, y)
        else:
            target.move_to(x, y)
        return True

    def _trace_line(self, target: RenderTarget, data: LineData) -> None:
        """Clip the infinite line to the visible viewport."""
        left, top, right, bottom = self._transform.visible_bounds()
        (px, py), (dx, dy) = data.point, data.direction
        if dx != 0.0:
            m = dy / dx
            c = py - px * m
            y_left = m * left + c
            y_right = m * right + c
            if max(y_left, y_right) < bottom or min(y_left, y_right) > top:
                return
            target.move_to(*self._transform.to_pixel(left, y_left))
            target.line_to(*self._transform.to_pixel(right, y_right))
            return
        x, _ = self._transform.to_pixel(px, 0.0)
        if 0.0 <= x <= target.width:
            target.move_to(x, 0.0)
            target.line_to(x, target.height)

    def _draw_image(self, target: RenderTarget, data: ImageData) -> None:
        left, top = self._transform.to_pixel(data.x, data.y)
        right, bottom = self._transform.to_pixel(data.x + data.width, data.y - data.height)
        width = right - left
        height = bottom - top
        # Real-plane anticlockwise is raster clockwise negated.
        rotation = None if data.rotation is None else -data.rotation
        target.draw_image(data.image, left, top, width, height, rotation)


__all__ = ["GridRenderer"]
