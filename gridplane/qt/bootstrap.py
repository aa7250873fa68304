"""Qt application bootstrap for a standalone grid window."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gridplane.api.settings import GridSettings
from gridplane.qt.canvas import GridCanvas
from gridplane.runtime.logging import setup_grid_logging

try:
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the Qt backend. Install dependency 'PyQt6'.") from exc


@dataclass(frozen=True, slots=True)
class QtGridBundle:
    """Window plus the callable that runs the Qt event loop."""

    canvas: GridCanvas
    run_event_loop: Callable[[], int]


def create_qt_grid(
    *,
    width: int = 800,
    height: int = 600,
    title: str = "gridplane",
    settings: GridSettings | None = None,
) -> QtGridBundle:
    """Build a top-level grid window and its event-loop runner."""
    setup_grid_logging()
    app = QApplication.instance() or QApplication([])
    canvas = GridCanvas(width=width, height=height, settings=settings)
    canvas.setWindowTitle(title)
    canvas.show()
    return QtGridBundle(canvas=canvas, run_event_loop=lambda: app.exec())


__all__ = ["QtGridBundle", "create_qt_grid"]
