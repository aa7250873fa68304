from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from gridplane.api.objects import TextAlignment  # noqa: E402
from gridplane.qt.painter_target import QImageRenderTarget  # noqa: E402


@pytest.fixture(scope="module")
def qt_app() -> QApplication:
    return QApplication.instance() or QApplication([])


def _colour_at(target: QImageRenderTarget, x: int, y: int) -> str:
    return target.image.pixelColor(x, y).name()


def test_fill_rect_paints_background(qt_app) -> None:
    target = QImageRenderTarget(40, 30)
    target.begin_frame()
    target.set_fill_colour("#ff0000")
    target.fill_rect(0, 0, 40, 30)
    target.end_frame()
    assert _colour_at(target, 20, 15) == "#ff0000"
    assert (target.width, target.height) == (40.0, 30.0)


def test_filled_path_and_present_callback(qt_app) -> None:
    presented: list[int] = []
    target = QImageRenderTarget(40, 40, on_present=lambda: presented.append(1))
    target.begin_frame()
    target.set_fill_colour("#0000ff")
    target.begin_path()
    target.move_to(10, 10)
    target.line_to(30, 10)
    target.line_to(30, 30)
    target.line_to(10, 30)
    target.close_path()
    target.fill()
    target.end_frame()
    assert _colour_at(target, 20, 20) == "#0000ff"
    assert _colour_at(target, 2, 2) == "#ffffff"
    assert presented == [1]


def test_filled_arc_covers_circle_centre(qt_app) -> None:
    target = QImageRenderTarget(40, 40)
    target.begin_frame()
    target.set_fill_colour("#00ff00")
    target.begin_path()
    target.arc(20, 20, 10, 0.0, 6.283185307179586)
    target.fill()
    target.end_frame()
    assert _colour_at(target, 20, 20) == "#00ff00"
    assert _colour_at(target, 2, 2) == "#ffffff"


def test_draw_calls_require_an_open_frame(qt_app) -> None:
    target = QImageRenderTarget(10, 10)
    with pytest.raises(RuntimeError):
        target.fill_rect(0, 0, 5, 5)
    with pytest.raises(RuntimeError):
        target.draw_text("x", 0, 0, TextAlignment.LEFT, "Arial", 12)


def test_resize_is_refused_mid_frame(qt_app) -> None:
    target = QImageRenderTarget(10, 10)
    target.resize(20, 15)
    assert (target.width, target.height) == (20.0, 15.0)
    target.begin_frame()
    try:
        with pytest.raises(RuntimeError):
            target.resize(5, 5)
    finally:
        target.end_frame()
