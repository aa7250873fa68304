"""Qt widget hosting one grid engine instance."""

from __future__ import annotations

from collections.abc import Callable

from gridplane.api.input_events import PointerEvent, WheelEvent
from gridplane.api.render_target import FrameCallback
from gridplane.api.settings import GridSettings
from gridplane.input.input_controller import InputController
from gridplane.qt.painter_target import QImageRenderTarget
from gridplane.runtime.config import GridRuntimeConfig, load_runtime_config
from gridplane.runtime.grid import Grid

try:
    from PyQt6.QtCore import QTimer, Qt
    from PyQt6.QtGui import QMouseEvent, QPainter, QWheelEvent
    from PyQt6.QtWidgets import QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt backend. Install dependency 'PyQt6'.") from exc


class QtFrameScheduler:
    """Frame scheduler firing each callback once on the Qt event loop."""

    def __init__(self, interval_ms: int = 16) -> None:
        self._interval_ms = max(0, int(interval_ms))

    def __call__(self, callback: FrameCallback) -> None:
        QTimer.singleShot(self._interval_ms, callback)


class GridCanvas(QWidget):
    """Widget showing a grid and forwarding drag/wheel input to it."""

    def __init__(
        self,
        *,
        width: int = 800,
        height: int = 600,
        settings: GridSettings | None = None,
        runtime_config: GridRuntimeConfig | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        super().__init__()
        config = runtime_config if runtime_config is not None else load_runtime_config()
        self.resize(width, height)
        self.setMouseTracking(True)
        self.target = QImageRenderTarget(width, height, on_present=self.update)
        self.grid = Grid(
            self.target,
            settings=settings,
            schedule_frame=QtFrameScheduler(config.frame_interval_ms),
            clock=clock,
        )
        self.input = InputController(self.grid, wheel_zoom_rate=config.wheel_zoom_rate)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.target.resize(max(1, self.width()), max(1, self.height()))
        self.grid.redraw()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        painter = QPainter(self)
        painter.drawImage(0, 0, self.target.image)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        self._forward_pointer("pointer_down", event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        self._forward_pointer("pointer_up", event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        self._forward_pointer("pointer_move", event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        super().leaveEvent(event)
        x, y = self.input.pointer_position or (0.0, 0.0)
        self.input.handle_pointer(PointerEvent("pointer_leave", x, y))

    def wheelEvent(self, event: QWheelEvent) -> None:  # type: ignore[override]
        position = event.position()
        # Qt reports positive angle deltas when scrolling up.
        self.input.handle_wheel(WheelEvent(position.x(), position.y(), -float(event.angleDelta().y())))
        event.accept()

    def _forward_pointer(self, event_type: str, event: QMouseEvent) -> None:
        position = event.position()
        button = _BUTTONS.get(event.button(), 0)
        self.input.handle_pointer(PointerEvent(event_type, position.x(), position.y(), button))


_BUTTONS = {
    Qt.MouseButton.LeftButton: 1,
    Qt.MouseButton.RightButton: 2,
    Qt.MouseButton.MiddleButton: 3,
}

__all__ = ["GridCanvas", "QtFrameScheduler"]
