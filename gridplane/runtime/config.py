"""Centralized environment configuration for engine hosts."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_FRAME_INTERVAL_MS = 16
DEFAULT_WHEEL_ZOOM_RATE = 0.001


@dataclass(frozen=True, slots=True)
class GridRuntimeConfig:
    """Immutable host/runtime configuration sourced from environment."""

    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    wheel_zoom_rate: float = DEFAULT_WHEEL_ZOOM_RATE


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with engine-prefixed override."""
    value = os.getenv("GRIDPLANE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_runtime_config() -> GridRuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    log_format = os.getenv("GRIDPLANE_LOG_FORMAT", "text").strip().lower()
    if log_format not in {"text", "json"}:
        log_format = "text"
    log_file = os.getenv("GRIDPLANE_LOG_FILE", "").strip() or None
    frame_interval_ms = _int("GRIDPLANE_FRAME_INTERVAL_MS", DEFAULT_FRAME_INTERVAL_MS)
    if frame_interval_ms < 0:
        frame_interval_ms = DEFAULT_FRAME_INTERVAL_MS
    return GridRuntimeConfig(
        log_level=resolve_log_level_name(),
        log_format=log_format,
        log_file=log_file,
        frame_interval_ms=frame_interval_ms,
        wheel_zoom_rate=_float("GRIDPLANE_WHEEL_ZOOM_RATE", DEFAULT_WHEEL_ZOOM_RATE),
    )


__all__ = ["GridRuntimeConfig", "load_runtime_config", "resolve_log_level_name"]
