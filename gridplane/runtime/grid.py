"""Engine instance: one render target, its transform, scene and drivers."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from gridplane.api.objects import GridObject, ObjectData, ObjectKind, ParametricCallable, TextAlignment
from gridplane.api.render_target import FrameScheduler, RenderTarget
from gridplane.api.settings import GridSettings
from gridplane.rendering.renderer import GridRenderer
from gridplane.runtime.animation import AnimationCallback, AnimationDriver, AnimationTask, ManualFrameScheduler
from gridplane.runtime.scene import Scene, StyleOverrides
from gridplane.runtime.transform import CoordinateTransform

logger = logging.getLogger(__name__)


class Grid:
    """Interactive coordinate plane bound to one render target.

    Owns all of its state; instances share nothing, so a caller-supplied
    `settings` is copied. Mutate `grid.settings` to change a live instance.
    Every mutation redraws the full scene synchronously.
    """

    def __init__(
        self,
        target: RenderTarget,
        *,
        settings: GridSettings | None = None,
        schedule_frame: FrameScheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.target = target
        self.settings = copy.deepcopy(settings) if settings is not None else GridSettings()
        self.transform = CoordinateTransform(
            self._target_size,
            scale=self.settings.initial_scale,
            gridlines=lambda: self.settings.grid_lines.tiers(),
        )
        self.scene = Scene(default_style=lambda: self.settings.default_style, on_change=self.redraw)
        self.renderer = GridRenderer(scene=self.scene, transform=self.transform, settings=self.settings)
        self.frame_scheduler = schedule_frame if schedule_frame is not None else ManualFrameScheduler()
        self._animations = AnimationDriver(
            schedule_frame=self.frame_scheduler, redraw=self.redraw, clock=clock
        )
        self.redraw()

    def _target_size(self) -> tuple[float, float]:
        return float(self.target.width), float(self.target.height)

    def redraw(self) -> None:
        """Repaint background, gridlines, axes and every visible object."""
        self.renderer.redraw(self.target)

    # -- coordinates ---------------------------------------------------------

    def to_pixel(self, x: float, y: float) -> tuple[float, float]:
        return self.transform.to_pixel(x, y)

    def to_real(self, px: float, py: float) -> tuple[float, float]:
        return self.transform.to_real(px, py)

    def units_to_pixels(self) -> float:
        return self.transform.units_to_pixels()

    def pan(self, dx: float, dy: float) -> bool:
        """Shift the view by a real-unit delta; returns False when disabled or vetoed."""
        scroll = self.settings.scroll
        if not scroll.enabled:
            return False
        if scroll.callback is not None and not scroll.callback(dx, dy):
            logger.debug("pan_vetoed dx=%g dy=%g", dx, dy)
            return False
        self.transform.pan(dx, dy)
        self.redraw()
        return True

    def zoom_at(self, factor: float, px: float, py: float) -> bool:
        """Zoom by `1 + factor` about pixel (px, py); returns False when disabled or vetoed."""
        zoom = self.settings.zoom
        if not zoom.enabled:
            return False
        if zoom.callback is not None and not zoom.callback(factor, px, py):
            logger.debug("zoom_vetoed factor=%g x=%g y=%g", factor, px, py)
            return False
        self.transform.zoom_at(factor, px, py)
        self.redraw()
        return True

    # -- scene ---------------------------------------------------------------

    def add_object(self, kind: ObjectKind | str, data: ObjectData, style: StyleOverrides | None = None) -> int:
        return self.scene.add(kind, data, style)

    def remove_object(self, object_id: int) -> None:
        self.scene.remove(object_id)

    def remove_all(self) -> None:
        self.scene.remove_all()

    def get_object(self, object_id: int) -> GridObject:
        return self.scene.get(object_id)

    def set_z(self, object_id: int, z: int) -> None:
        self.scene.set_z(object_id, z)

    def add_shape(self, points: Iterable[Sequence[float]], style: StyleOverrides | None = None) -> int:
        return self.scene.add_shape(points, style)

    def add_polygon(
        self,
        n: int,
        cx: float,
        cy: float,
        radius: float,
        rotation: float = 0.0,
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_polygon(n, cx, cy, radius, rotation, style)

    def add_circle(self, x: float, y: float, radius: float, style: StyleOverrides | None = None) -> int:
        return self.scene.add_circle(x, y, radius, style)

    def add_parametric_function(
        self,
        f: ParametricCallable,
        interval: Sequence[float],
        *,
        integer_points_only: bool = False,
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_parametric_function(
            f, interval, integer_points_only=integer_points_only, style=style
        )

    def add_function(
        self,
        f: Callable[[float], float | None],
        interval: Sequence[float],
        *,
        integer_points_only: bool = False,
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_function(f, interval, integer_points_only=integer_points_only, style=style)

    def add_line(
        self,
        point: Sequence[float],
        direction: Sequence[float],
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_line(point, direction, style)

    def add_tangent(self, function_id: int, x: float, style: StyleOverrides | None = None) -> int:
        return self.scene.add_tangent(function_id, x, style)

    def add_text(
        self,
        text: str,
        x: float,
        y: float,
        alignment: TextAlignment | str = TextAlignment.LEFT,
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_text(text, x, y, alignment, style)

    def add_image(
        self,
        image: Any,
        x: float,
        y: float,
        width: float,
        height: float,
        rotation: float | None = None,
        style: StyleOverrides | None = None,
    ) -> int:
        return self.scene.add_image(image, x, y, width, height, rotation, style)

    # -- animation -----------------------------------------------------------

    def run_animation(
        self,
        callback: AnimationCallback,
        start: float,
        end: float,
        speed: float,
    ) -> AnimationTask:
        """Call `callback(n)` then redraw each frame while n runs from start to end."""
        return self._animations.run(callback, start, end, speed)


__all__ = ["Grid"]
