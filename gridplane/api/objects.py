"""Drawable object model: kind tags, per-kind payloads and style."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any, TypeAlias

from gridplane.api.errors import InvalidArgumentError

Point: TypeAlias = tuple[float, float]
# Returns (x, y); `None` or a `None` y-value marks an undefined sample.
ParametricCallable: TypeAlias = Callable[[float], Any]


class ObjectKind(StrEnum):
    SHAPE = "shape"
    CIRCLE = "circle"
    FUNCTION = "function"
    LINE = "line"
    TEXT = "text"
    IMAGE = "image"


class TextAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Style:
    """Per-object drawing style."""

    colour: str = "#ee0155"
    line_width: float = 2.0
    fill: bool = False
    font: str = "Arial"
    font_size: float = 25.0
    hidden: bool = False

    def merged(self, overrides: Mapping[str, Any] | None) -> Style:
        """Return a copy with explicit `overrides` applied over this style."""
        if not overrides:
            return self
        known = {f.name for f in fields(Style)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown style field(s): {', '.join(unknown)}")
        return replace(self, **dict(overrides))


@dataclass(frozen=True, slots=True)
class ShapeData:
    points: tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class CircleData:
    x: float
    y: float
    radius: float


@dataclass(frozen=True, slots=True)
class Domain:
    """Sampling domain of a plotted function."""

    interval: tuple[float, float]
    integer_points_only: bool = False


@dataclass(frozen=True, slots=True)
class FunctionData:
    function: ParametricCallable
    domain: Domain


@dataclass(frozen=True, slots=True)
class LineData:
    point: Point
    direction: Point


@dataclass(frozen=True, slots=True)
class TextData:
    text: str
    x: float
    y: float
    alignment: TextAlignment


@dataclass(frozen=True, slots=True)
class ImageData:
    """Image anchored at its top-left real point; rotation is anticlockwise radians."""

    image: Any
    x: float
    y: float
    width: float
    height: float
    rotation: float | None = None


ObjectData: TypeAlias = ShapeData | CircleData | FunctionData | LineData | TextData | ImageData

PAYLOAD_TYPES: dict[ObjectKind, type] = {
    ObjectKind.SHAPE: ShapeData,
    ObjectKind.CIRCLE: CircleData,
    ObjectKind.FUNCTION: FunctionData,
    ObjectKind.LINE: LineData,
    ObjectKind.TEXT: TextData,
    ObjectKind.IMAGE: ImageData,
}


@dataclass(frozen=True, slots=True)
class GridObject:
    """One drawable owned by the object store."""

    id: int
    kind: ObjectKind
    data: ObjectData
    style: Style


def resolve_kind(kind: ObjectKind | str) -> ObjectKind:
    """Normalize a kind tag, rejecting unrecognized variants."""
    try:
        return ObjectKind(kind)
    except ValueError:
        raise InvalidArgumentError(f"Invalid type {kind!r}") from None


def resolve_alignment(alignment: TextAlignment | str) -> TextAlignment:
    """Normalize a text alignment name case-insensitively."""
    normalized = str(alignment).lower()
    try:
        return TextAlignment(normalized)
    except ValueError:
        allowed = ", ".join(a.value for a in TextAlignment)
        raise InvalidArgumentError(
            f"Invalid alignment {alignment!r} - must be one of {allowed}"
        ) from None


__all__ = [
    "CircleData",
    "Domain",
    "FunctionData",
    "GridObject",
    "ImageData",
    "LineData",
    "ObjectData",
    "ObjectKind",
    "PAYLOAD_TYPES",
    "ParametricCallable",
    "Point",
    "ShapeData",
    "Style",
    "TextAlignment",
    "TextData",
    "resolve_alignment",
    "resolve_kind",
]
