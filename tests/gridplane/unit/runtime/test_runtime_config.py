from __future__ import annotations

from gridplane.runtime.config import (
    DEFAULT_FRAME_INTERVAL_MS,
    DEFAULT_WHEEL_ZOOM_RATE,
    load_runtime_config,
    resolve_log_level_name,
)

_ENV = (
    "GRIDPLANE_LOG_LEVEL",
    "LOG_LEVEL",
    "GRIDPLANE_LOG_FORMAT",
    "GRIDPLANE_LOG_FILE",
    "GRIDPLANE_FRAME_INTERVAL_MS",
    "GRIDPLANE_WHEEL_ZOOM_RATE",
)


def _clear(monkeypatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment(monkeypatch) -> None:
    _clear(monkeypatch)
    cfg = load_runtime_config()
    assert cfg.log_level == "INFO"
    assert cfg.log_format == "text"
    assert cfg.log_file is None
    assert cfg.frame_interval_ms == DEFAULT_FRAME_INTERVAL_MS
    assert cfg.wheel_zoom_rate == DEFAULT_WHEEL_ZOOM_RATE


def test_load_runtime_config_parses_env(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GRIDPLANE_LOG_LEVEL", "debug")
    monkeypatch.setenv("GRIDPLANE_LOG_FORMAT", " JSON ")
    monkeypatch.setenv("GRIDPLANE_LOG_FILE", "logs/grid.log")
    monkeypatch.setenv("GRIDPLANE_FRAME_INTERVAL_MS", "33")
    monkeypatch.setenv("GRIDPLANE_WHEEL_ZOOM_RATE", "0.002")

    cfg = load_runtime_config()

    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"
    assert cfg.log_file == "logs/grid.log"
    assert cfg.frame_interval_ms == 33
    assert cfg.wheel_zoom_rate == 0.002


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("GRIDPLANE_LOG_FORMAT", "xml")
    monkeypatch.setenv("GRIDPLANE_FRAME_INTERVAL_MS", "-5")
    monkeypatch.setenv("GRIDPLANE_WHEEL_ZOOM_RATE", "fast")

    cfg = load_runtime_config()

    assert cfg.log_format == "text"
    assert cfg.frame_interval_ms == DEFAULT_FRAME_INTERVAL_MS
    assert cfg.wheel_zoom_rate == DEFAULT_WHEEL_ZOOM_RATE


def test_resolve_log_level_prefers_gridplane_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("GRIDPLANE_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("GRIDPLANE_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"
