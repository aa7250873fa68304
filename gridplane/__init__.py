"""Interactive 2D coordinate-plane rendering engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridplane.api.settings import GridSettings
    from gridplane.qt.bootstrap import QtGridBundle


def run(*, width: int = 800, height: int = 600, settings: GridSettings | None = None) -> int:
    """Open one Qt grid window and block in its event loop."""
    bundle = open_window(width=width, height=height, settings=settings)
    return bundle.run_event_loop()


def open_window(*, width: int = 800, height: int = 600, settings: GridSettings | None = None) -> QtGridBundle:
    """Create a Qt grid window without entering the event loop."""
    from gridplane.qt.bootstrap import create_qt_grid

    return create_qt_grid(width=width, height=height, settings=settings)


__all__ = ["open_window", "run"]
