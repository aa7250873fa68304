"""Engine settings surface with the stock defaults."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from gridplane.api.errors import InvalidArgumentError
from gridplane.api.objects import Style


@dataclass(slots=True)
class GridlineTier:
    """One gridline tier; `spacing` is in real units and rescales with zoom."""

    spacing: float
    colour: str
    width: float


@dataclass(slots=True)
class GridlineSettings:
    major: GridlineTier = field(default_factory=lambda: GridlineTier(1.0, "#555", 1.0))
    minor: GridlineTier = field(default_factory=lambda: GridlineTier(0.2, "#777", 0.5))

    def tiers(self) -> tuple[GridlineTier, GridlineTier]:
        return (self.major, self.minor)


@dataclass(slots=True)
class AxesSettings:
    enabled: bool = True
    colour: str = "black"
    width: float = 2.0


@dataclass(slots=True)
class BorderSettings:
    colour: str = "black"
    width: float = 5.0


@dataclass(slots=True)
class GestureSettings:
    """Enable flag plus optional veto for one gesture.

    The veto receives the gesture arguments and cancels it by returning a
    falsy value.
    """

    enabled: bool = True
    callback: Callable[..., object] | None = None


@dataclass(slots=True)
class GridSettings:
    """Mutable engine configuration; read on every redraw and gesture."""

    delta: float = 0.02
    grid_lines: GridlineSettings = field(default_factory=GridlineSettings)
    background_colour: str = "white"
    axes: AxesSettings = field(default_factory=AxesSettings)
    border: BorderSettings = field(default_factory=BorderSettings)
    default_style: Style = field(default_factory=Style)
    zoom: GestureSettings = field(default_factory=GestureSettings)
    scroll: GestureSettings = field(default_factory=GestureSettings)
    initial_scale: float = 100.0

    def __post_init__(self) -> None:
        if self.delta <= 0.0:
            raise InvalidArgumentError("delta must be > 0")
        if self.initial_scale <= 0.0:
            raise InvalidArgumentError("initial_scale must be > 0")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> GridSettings:
        """Build settings from a nested mapping; omitted keys keep defaults."""
        _reject_unknown("settings", raw, {f.name for f in fields(cls)})
        kwargs: dict[str, Any] = {}
        for name in ("delta", "background_colour", "initial_scale"):
            if name in raw:
                kwargs[name] = raw[name]
        if "grid_lines" in raw:
            lines = raw["grid_lines"]
            _reject_unknown("grid_lines", lines, {"major", "minor"})
            defaults = GridlineSettings()
            kwargs["grid_lines"] = GridlineSettings(
                major=_tier(lines.get("major"), defaults.major),
                minor=_tier(lines.get("minor"), defaults.minor),
            )
        if "axes" in raw:
            kwargs["axes"] = _section("axes", AxesSettings, raw["axes"])
        if "border" in raw:
            kwargs["border"] = _section("border", BorderSettings, raw["border"])
        if "default_style" in raw:
            kwargs["default_style"] = Style().merged(raw["default_style"])
        if "zoom" in raw:
            kwargs["zoom"] = _section("zoom", GestureSettings, raw["zoom"])
        if "scroll" in raw:
            kwargs["scroll"] = _section("scroll", GestureSettings, raw["scroll"])
        return cls(**kwargs)


def _reject_unknown(section: str, raw: Mapping[str, Any], known: set[str]) -> None:
    unknown = sorted(set(raw) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown {section} key(s): {', '.join(unknown)}")


def _section(section: str, cls: type, raw: Mapping[str, Any]) -> Any:
    _reject_unknown(section, raw, {f.name for f in fields(cls)})
    return cls(**dict(raw))


def _tier(raw: Mapping[str, Any] | None, default: GridlineTier) -> GridlineTier:
    if raw is None:
        return default
    _reject_unknown("grid_lines tier", raw, {"spacing", "colour", "width"})
    spacing = float(raw.get("spacing", default.spacing))
    if spacing <= 0.0:
        raise InvalidArgumentError("gridline spacing must be > 0")
    return GridlineTier(
        spacing=spacing,
        colour=str(raw.get("colour", default.colour)),
        width=float(raw.get("width", default.width)),
    )


__all__ = [
    "AxesSettings",
    "BorderSettings",
    "GestureSettings",
    "GridSettings",
    "GridlineSettings",
    "GridlineTier",
]
