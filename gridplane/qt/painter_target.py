"""QPainter render target drawing into a QImage back-buffer."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from gridplane.api.objects import TextAlignment

try:
    from PyQt6.QtCore import QPointF, QRectF, Qt
    from PyQt6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen, QPixmap
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt backend. Install dependency 'PyQt6'.") from exc


class QImageRenderTarget:
    """Render target backed by a QImage; `on_present` fires after each frame."""

    def __init__(self, width: int, height: int, on_present: Callable[[], None] | None = None) -> None:
        self._image = _new_image(width, height)
        self._on_present = on_present
        self._painter: QPainter | None = None
        self._path = QPainterPath()
        self._fill = QColor("black")
        self._stroke = QColor("black")
        self._line_width = 1.0

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def width(self) -> float:
        return float(self._image.width())

    @property
    def height(self) -> float:
        return float(self._image.height())

    def resize(self, width: int, height: int) -> None:
        if self._painter is not None:
            raise RuntimeError("cannot resize while a frame is being drawn")
        if (width, height) != (self._image.width(), self._image.height()):
            self._image = _new_image(width, height)

    def begin_frame(self) -> None:
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)
        self._painter = painter
        self._path = QPainterPath()

    def end_frame(self) -> None:
        if self._painter is not None:
            self._painter.end()
            self._painter = None
        if self._on_present is not None:
            self._on_present()

    def _active(self) -> QPainter:
        if self._painter is None:
            raise RuntimeError("draw call outside begin_frame()/end_frame()")
        return self._painter

    def set_fill_colour(self, colour: str) -> None:
        self._fill = QColor(colour)

    def set_stroke_colour(self, colour: str) -> None:
        self._stroke = QColor(colour)

    def set_line_width(self, width: float) -> None:
        self._line_width = float(width)

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def close_path(self) -> None:
        self._path.closeSubpath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        if self._path.elementCount() == 0:
            self._path.moveTo(QPointF(x, y))
            return
        self._path.lineTo(QPointF(x, y))

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        rect = QRectF(cx - radius, cy - radius, 2.0 * radius, 2.0 * radius)
        # Qt measures angles anticlockwise in degrees; raster arcs run clockwise.
        start_deg = -math.degrees(start)
        sweep_deg = -math.degrees(end - start)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, start_deg)
        self._path.arcTo(rect, start_deg, sweep_deg)

    def fill(self) -> None:
        self._active().fillPath(self._path, QBrush(self._fill))

    def stroke(self) -> None:
        self._active().strokePath(self._path, self._pen())

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._active().fillRect(QRectF(x, y, width, height), self._fill)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        painter = self._active()
        painter.setPen(self._pen())
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(QRectF(x, y, width, height))

    def draw_image(
        self,
        image: Any,
        x: float,
        y: float,
        width: float,
        height: float,
        rotation: float | None = None,
    ) -> None:
        painter = self._active()
        painter.save()
        if rotation is None:
            dest = QRectF(x, y, width, height)
        else:
            painter.translate(x + 0.5 * width, y + 0.5 * height)
            painter.rotate(math.degrees(rotation))
            dest = QRectF(-0.5 * width, -0.5 * height, width, height)
        if isinstance(image, QPixmap):
            painter.drawPixmap(dest, image, QRectF(image.rect()))
        else:
            painter.drawImage(dest, image)
        painter.restore()

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        alignment: TextAlignment,
        font: str,
        font_size: float,
    ) -> None:
        painter = self._active()
        qfont = QFont(font)
        qfont.setPixelSize(max(1, int(round(font_size))))
        metrics = QFontMetricsF(qfont)
        advance = metrics.horizontalAdvance(text)
        if alignment is TextAlignment.CENTER:
            x -= 0.5 * advance
        elif alignment is TextAlignment.RIGHT:
            x -= advance
        baseline = y + 0.5 * (metrics.ascent() - metrics.descent())
        painter.setFont(qfont)
        painter.setPen(self._fill)
        painter.drawText(QPointF(x, baseline), text)

    def _pen(self) -> QPen:
        pen = QPen(self._stroke)
        pen.setWidthF(self._line_width)
        return pen


def _new_image(width: int, height: int) -> QImage:
    image = QImage(max(1, int(width)), max(1, int(height)), QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(QColor("white"))
    return image


__all__ = ["QImageRenderTarget"]
