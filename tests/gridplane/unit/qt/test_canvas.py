from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from gridplane.api.input_events import PointerEvent, WheelEvent  # noqa: E402
from gridplane.qt.canvas import GridCanvas  # noqa: E402
from gridplane.runtime.config import GridRuntimeConfig  # noqa: E402


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    return QApplication.instance() or QApplication([])


def test_canvas_centres_origin_and_paints_background(qt_app) -> None:
    canvas = GridCanvas(width=200, height=100, runtime_config=GridRuntimeConfig())
    assert canvas.grid.to_pixel(0, 0) == pytest.approx((100.0, 50.0))
    assert canvas.target.image.pixelColor(150, 20).name() == "#ffffff"
    canvas.deleteLater()


def test_canvas_input_controller_drives_grid(qt_app) -> None:
    canvas = GridCanvas(width=200, height=100, runtime_config=GridRuntimeConfig())
    canvas.input.handle_event(PointerEvent("pointer_move", 10.0, 10.0))
    canvas.input.handle_event(PointerEvent("pointer_down", 10.0, 10.0, 1))
    canvas.input.handle_event(PointerEvent("pointer_move", 60.0, 10.0))
    assert canvas.grid.to_pixel(0, 0) == pytest.approx((150.0, 50.0))

    canvas.input.handle_event(WheelEvent(150.0, 50.0, -1000.0))
    assert canvas.grid.units_to_pixels() == pytest.approx(1 / 200)
    canvas.deleteLater()
