"""Object store with stable ids, z-ordering and typed constructors."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from gridplane.api.errors import InvalidArgumentError, NotFoundError, WrongTypeError
from gridplane.api.objects import (
    PAYLOAD_TYPES,
    CircleData,
    Domain,
    FunctionData,
    GridObject,
    ImageData,
    LineData,
    ObjectData,
    ObjectKind,
    ParametricCallable,
    Point,
    ShapeData,
    Style,
    TextAlignment,
    TextData,
    resolve_alignment,
    resolve_kind,
)
from gridplane.runtime.z_index import ZIndex

logger = logging.getLogger(__name__)

StyleOverrides = Mapping[str, Any]

TANGENT_PROBE_STEP = 0.0001


class Scene:
    """Own every drawable, keyed by a monotonically increasing id.

    Callers only ever hold ids. Each successful mutation invokes
    `on_change` once so the owner can redraw.
    """

    def __init__(
        self,
        *,
        default_style: Callable[[], Style] = Style,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._default_style = default_style
        self._on_change = on_change
        self._objects: dict[int, GridObject] = {}
        self._z_index = ZIndex()
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    def ids(self) -> tuple[int, ...]:
        return tuple(self._objects)

    def draw_order(self) -> Iterator[GridObject]:
        """Yield live objects in ascending z, ties in insertion order."""
        for object_id in self._z_index:
            yield self._objects[object_id]

    def z_of(self, object_id: int) -> int:
        self.get(object_id)
        return self._z_index.level_of(object_id)

    # -- generic store -------------------------------------------------------

    def add(
        self,
        kind: ObjectKind | str,
        data: ObjectData,
        style: StyleOverrides | None = None,
    ) -> int:
        """Register a drawable at z-level 0 and return its id."""
        resolved = resolve_kind(kind)
        expected = PAYLOAD_TYPES[resolved]
        if not isinstance(data, expected):
            raise InvalidArgumentError(
                f"{resolved.value} objects need {expected.__name__}, got {type(data).__name__}"
            )
        merged = self._default_style().merged(style)
        object_id = self._next_id
        self._next_id += 1
        self._objects[object_id] = GridObject(id=object_id, kind=resolved, data=data, style=merged)
        self._z_index.set(object_id, 0)
        logger.debug("object_added id=%d kind=%s", object_id, resolved.value)
        try:
            self._changed()
        except Exception:
            self._discard(object_id)
            raise
        return object_id

    def get(self, object_id: int) -> GridObject:
        try:
            return self._objects[object_id]
        except KeyError:
            raise NotFoundError(f"No object found with ID {object_id!r}") from None

    def remove(self, object_id: int) -> None:
        self._discard(object_id)
        self._changed()

    def remove_all(self) -> None:
        for object_id in list(self._objects):
            self._discard(object_id)
        self._changed()

    def set_z(self, object_id: int, z: int) -> None:
        """Move an object to the end of the bucket for level `z`."""
        self.get(object_id)
        level = int(z)
        if level != z:
            raise InvalidArgumentError(f"z must be an integer level, got {z!r}")
        self._z_index.set(object_id, level)
        logger.debug("object_z_moved id=%d z=%d", object_id, level)
        self._changed()

    def _discard(self, object_id: int) -> None:
        self.get(object_id)
        self._z_index.unset(object_id)
        del self._objects[object_id]
        logger.debug("object_removed id=%d", object_id)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    # -- typed constructors ----------------------------------------------------

    def add_shape(self, points: Iterable[Sequence[float]], style: StyleOverrides | None = None) -> int:
        """Add a polyline through `points`; drawing closes it back to the first point."""
        normalized = tuple(_point(p) for p in points)
        if not normalized:
            raise InvalidArgumentError("A shape needs at least one point")
        return self.add(ObjectKind.SHAPE, ShapeData(points=normalized), style)

    def add_polygon(
        self,
        n: int,
        cx: float,
        cy: float,
        radius: float,
        rotation: float = 0.0,
        style: StyleOverrides | None = None,
    ) -> int:
        """Add a regular n-gon; `rotation` is anticlockwise radians."""
        if n < 1:
            raise InvalidArgumentError("A polygon needs at least one side")
        points = []
        for i in range(n + 1):
            angle = rotation + 2.0 * math.pi * i / n
            points.append((radius * math.cos(angle) + cx, radius * math.sin(angle) + cy))
        return self.add_shape(points, style)

    def add_circle(self, x: float, y: float, radius: float, style: StyleOverrides | None = None) -> int:
        return self.add(ObjectKind.CIRCLE, CircleData(float(x), float(y), float(radius)), style)

    def add_parametric_function(
        self,
        f: ParametricCallable,
        interval: Sequence[float],
        *,
        integer_points_only: bool = False,
        style: StyleOverrides | None = None,
    ) -> int:
        """Add a parametric curve `(x, y) = f(t)` sampled over `interval`."""
        if len(interval) != 2:
            raise InvalidArgumentError("Invalid interval - must have exactly two end points")
        start, end = float(interval[0]), float(interval[1])
        if start > end:
            raise InvalidArgumentError("Invalid interval - start point must not exceed end point")
        domain = Domain(interval=(start, end), integer_points_only=integer_points_only)
        return self.add(ObjectKind.FUNCTION, FunctionData(function=f, domain=domain), style)

    def add_function(
        self,
        f: Callable[[float], float | None],
        interval: Sequence[float],
        *,
        integer_points_only: bool = False,
        style: StyleOverrides | None = None,
    ) -> int:
        """Add the graph of `y = f(x)`; `f` returning None leaves a gap."""

        def parametric(x: float) -> tuple[float, float | None]:
            return x, f(x)

        return self.add_parametric_function(
            parametric, interval, integer_points_only=integer_points_only, style=style
        )

    def add_line(
        self,
        point: Sequence[float],
        direction: Sequence[float],
        style: StyleOverrides | None = None,
    ) -> int:
        """Add the infinite line `point + t * direction`."""
        d = _point(direction)
        if d[0] == 0.0 and d[1] == 0.0:
            raise InvalidArgumentError("Invalid direction - must be non-zero")
        return self.add(ObjectKind.LINE, LineData(point=_point(point), direction=d), style)

    def add_tangent(self, function_id: int, x: float, style: StyleOverrides | None = None) -> int:
        """Add the tangent to a function object at parameter `x`."""
        obj = self.get(function_id)
        if not isinstance(obj.data, FunctionData):
            raise WrongTypeError(f"Object {function_id!r} is a {obj.kind.value}, not a function")
        f = obj.data.function
        p1 = _defined_sample(f(x), x)
        p2 = _defined_sample(f(x + TANGENT_PROBE_STEP), x + TANGENT_PROBE_STEP)
        return self.add_line(p1, (p2[0] - p1[0], p2[1] - p1[1]), style)

    def add_text(
        self,
        text: str,
        x: float,
        y: float,
        alignment: TextAlignment | str = TextAlignment.LEFT,
        style: StyleOverrides | None = None,
    ) -> int:
        data = TextData(text=str(text), x=float(x), y=float(y), alignment=resolve_alignment(alignment))
        return self.add(ObjectKind.TEXT, data, style)

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
        """Add an image whose top-left corner sits at real point (x, y)."""
        data = ImageData(
            image=image,
            x=float(x),
            y=float(y),
            width=float(width),
            height=float(height),
            rotation=None if rotation is None else float(rotation),
        )
        return self.add(ObjectKind.IMAGE, data, style)


def _point(raw: Sequence[float]) -> Point:
    if len(raw) != 2:
        raise InvalidArgumentError(f"Expected an (x, y) pair, got {raw!r}")
    return float(raw[0]), float(raw[1])


def _defined_sample(sample: Any, t: float) -> Point:
    if sample is None or sample[1] is None:
        raise InvalidArgumentError(f"Function is undefined at {t!r}")
    return float(sample[0]), float(sample[1])


__all__ = ["Scene", "StyleOverrides", "TANGENT_PROBE_STEP"]
