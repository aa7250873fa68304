"""Affine real-plane <-> pixel transform with cursor-anchored zoom."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from gridplane.api.errors import InvalidArgumentError
from gridplane.api.settings import GridlineTier
from gridplane.linalg.matrix import Matrix

logger = logging.getLogger(__name__)

SizeProvider = Callable[[], tuple[float, float]]
GridlineProvider = Callable[[], Sequence[GridlineTier]]

ZOOM_COUNTER_MIN = 0.5
ZOOM_COUNTER_MAX = 2.0


class CoordinateTransform:
    """Map real coordinates to render-target pixels.

    `pixel = zoom * real + translation`, then shifted by half the target
    size with y flipped. The target size is read on every call through
    `size`, never cached. x and y always scale identically.

    `zoom_counter` tracks cumulative zoom since gridline spacing was last
    rescaled; `zoom_at` keeps it inside [0.5, 2.0) by doubling or halving
    every tier returned by `gridlines`, which is read at each rescale.
    """

    def __init__(
        self,
        size: SizeProvider,
        *,
        scale: float = 100.0,
        gridlines: GridlineProvider = tuple,
    ) -> None:
        if scale <= 0.0:
            raise InvalidArgumentError("scale must be > 0")
        self._size = size
        self._zoom = Matrix([[scale, 0.0], [0.0, scale]])
        self._translation = Matrix.vector(0.0, 0.0)
        self._gridlines = gridlines
        self.zoom_counter = 1.0

    @property
    def zoom(self) -> Matrix:
        return self._zoom

    @property
    def translation(self) -> Matrix:
        return self._translation

    @property
    def scale(self) -> float:
        """Pixels per real unit."""
        return self._zoom.entry(0, 0)

    def to_pixel(self, x: float, y: float) -> tuple[float, float]:
        """Convert real coordinates to pixel coordinates."""
        width, height = self._size()
        p = self._zoom.multiply(Matrix.vector(x, y)).add(self._translation)
        return p.entry(0, 0) + 0.5 * width, -p.entry(1, 0) + 0.5 * height

    def to_real(self, px: float, py: float) -> tuple[float, float]:
        """Convert pixel coordinates to real coordinates."""
        width, height = self._size()
        centred = Matrix.vector(px - 0.5 * width, -(py - 0.5 * height))
        w = self._zoom.inverse().multiply(centred.subtract(self._translation))
        return w.entry(0, 0), w.entry(1, 0)

    def units_to_pixels(self) -> float:
        """Real units per pixel; divide a real length by this to get pixels."""
        # Uniform zoom: entry (0, 0) equals entry (1, 1).
        return 1.0 / self._zoom.entry(0, 0)

    def visible_bounds(self) -> tuple[float, float, float, float]:
        """Return the real-plane viewport as (left, top, right, bottom)."""
        width, height = self._size()
        left, top = self.to_real(0.0, 0.0)
        right, bottom = self.to_real(width, height)
        return left, top, right, bottom

    def pan(self, dx: float, dy: float) -> None:
        """Shift the view by a real-unit delta."""
        self._translation = self._translation.add(self._zoom.multiply(Matrix.vector(dx, dy)))

    def zoom_at(self, factor: float, px: float, py: float) -> float | None:
        """Scale by `1 + factor` keeping the real point under (px, py) fixed.

        Returns the factor applied to gridline spacings, or None when no
        rescale happened.
        """
        ratio = 1.0 + factor
        if ratio <= 0.0:
            raise InvalidArgumentError(f"zoom factor must be > -1, got {factor}")
        wx, wy = self.to_real(px, py)
        w = Matrix.vector(wx, wy)
        new_zoom = self._zoom.scale(ratio)
        self._translation = self._translation.subtract(new_zoom.subtract(self._zoom).multiply(w))
        self._zoom = new_zoom
        self.zoom_counter *= ratio
        return self._rescale_gridlines()

    def _rescale_gridlines(self) -> float | None:
        applied = 1.0
        while self.zoom_counter >= ZOOM_COUNTER_MAX or self.zoom_counter < ZOOM_COUNTER_MIN:
            step = 0.5 if self.zoom_counter >= ZOOM_COUNTER_MAX else 2.0
            for tier in self._gridlines():
                tier.spacing *= step
            self.zoom_counter *= step
            applied *= step
        if applied == 1.0:
            return None
        logger.debug(
            "gridline_rescale factor=%g counter=%g scale=%g", applied, self.zoom_counter, self.scale
        )
        return applied


__all__ = ["CoordinateTransform", "GridlineProvider", "SizeProvider", "ZOOM_COUNTER_MAX", "ZOOM_COUNTER_MIN"]
