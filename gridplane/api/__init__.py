"""Public engine API contracts."""

from gridplane.api.errors import (
    GridError,
    InvalidArgumentError,
    NotFoundError,
    SingularMatrixError,
    SizeMismatchError,
    WrongTypeError,
)
from gridplane.api.input_events import PointerEvent, WheelEvent
from gridplane.api.logging import GridLoggingConfig
from gridplane.api.objects import (
    CircleData,
    Domain,
    FunctionData,
    GridObject,
    ImageData,
    LineData,
    ObjectKind,
    ShapeData,
    Style,
    TextAlignment,
    TextData,
)
from gridplane.api.render_target import FrameScheduler, RenderTarget
from gridplane.api.settings import (
    AxesSettings,
    BorderSettings,
    GestureSettings,
    GridSettings,
    GridlineSettings,
    GridlineTier,
)

__all__ = [
    "AxesSettings",
    "BorderSettings",
    "CircleData",
    "Domain",
    "FrameScheduler",
    "FunctionData",
    "GestureSettings",
    "GridError",
    "GridLoggingConfig",
    "GridObject",
    "GridSettings",
    "GridlineSettings",
    "GridlineTier",
    "ImageData",
    "InvalidArgumentError",
    "LineData",
    "NotFoundError",
    "ObjectKind",
    "PointerEvent",
    "RenderTarget",
    "ShapeData",
    "SingularMatrixError",
    "SizeMismatchError",
    "Style",
    "TextAlignment",
    "TextData",
    "WheelEvent",
    "WrongTypeError",
]
