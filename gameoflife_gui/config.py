"""GUI configuration loader and data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from gameoflife.core.exceptions import ConfigurationError

DEFAULT_GUI_CONFIG_PATH = Path(__file__).parent / "gui.yaml"


@dataclass(frozen=True)
class TimingConfig:
    shortest_ms: int = 100
    longest_ms: int = 500
    speed_steps: int = 2


@dataclass(frozen=True)
class ColorConfig:
    alive: str = "steelblue"
    dead: str = "white"


@dataclass(frozen=True)
class ControlDefaults:
    speed: int = 1
    cell_size: int = 1
    canvas_size: int = 1


@dataclass(frozen=True)
class GuiConfig:
    cell_sizes: tuple[int, ...] = (10, 15, 20)
    canvas_scales: tuple[float, ...] = (0.3, 0.6, 0.9)
    timing: TimingConfig = field(default_factory=TimingConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    defaults: ControlDefaults = field(default_factory=ControlDefaults)


DEFAULT_GUI_CONFIG = GuiConfig()


def _parse_timing(value: dict[str, Any] | None) -> TimingConfig:
    if value is None:
        return TimingConfig()
    return TimingConfig(
        shortest_ms=int(value.get("shortest_ms", 100)),
        longest_ms=int(value.get("longest_ms", 500)),
        speed_steps=int(value.get("speed_steps", 2)),
    )


def _parse_colors(value: dict[str, Any] | None) -> ColorConfig:
    if value is None:
        return ColorConfig()
    return ColorConfig(
        alive=str(value.get("alive", "steelblue")),
        dead=str(value.get("dead", "white")),
    )


def _parse_defaults(value: dict[str, Any] | None) -> ControlDefaults:
    if value is None:
        return ControlDefaults()
    return ControlDefaults(
        speed=int(value.get("speed", 1)),
        cell_size=int(value.get("cell_size", 1)),
        canvas_size=int(value.get("canvas_size", 1)),
    )


def _validate(cfg: GuiConfig) -> None:
    if not cfg.cell_sizes or any(size <= 0 for size in cfg.cell_sizes):
        raise ConfigurationError("cell_sizes", "must be a non-empty list of positive sizes")
    if not cfg.canvas_scales or any(not 0.0 < s <= 1.0 for s in cfg.canvas_scales):
        raise ConfigurationError("canvas_scales", "must be fractions in (0, 1]")

    timing = cfg.timing
    if timing.shortest_ms <= 0 or timing.longest_ms < timing.shortest_ms:
        raise ConfigurationError("timing", "need 0 < shortest_ms <= longest_ms")
    if timing.speed_steps <= 0:
        raise ConfigurationError("timing.speed_steps", "must be positive")

    defaults = cfg.defaults
    if not 0 <= defaults.speed <= timing.speed_steps:
        raise ConfigurationError("defaults.speed", "outside the speed range")
    if not 0 <= defaults.cell_size < len(cfg.cell_sizes):
        raise ConfigurationError("defaults.cell_size", "no such cell size")
    if not 0 <= defaults.canvas_size < len(cfg.canvas_scales):
        raise ConfigurationError("defaults.canvas_size", "no such canvas size")


def parse_gui_config(raw: dict[str, Any]) -> GuiConfig:
    try:
        cfg = GuiConfig(
            cell_sizes=tuple(int(v) for v in raw.get("cell_sizes", (10, 15, 20))),
            canvas_scales=tuple(float(v) for v in raw.get("canvas_scales", (0.3, 0.6, 0.9))),
            timing=_parse_timing(raw.get("timing")),
            colors=_parse_colors(raw.get("colors")),
            defaults=_parse_defaults(raw.get("defaults")),
        )
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid GUI config schema: {exc}") from exc

    _validate(cfg)
    return cfg


def load_gui_config(path: str | Path | None = None) -> GuiConfig:
    path = Path(path) if path is not None else DEFAULT_GUI_CONFIG_PATH
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read GUI config {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError("GUI config must be a mapping")
    return parse_gui_config(raw)
