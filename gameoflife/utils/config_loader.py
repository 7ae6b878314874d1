"""Helpers for loading and validating engine configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from gameoflife.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class GridConfig:
    rows: int
    cols: int
    alive_probability: float = 0.5


@dataclass(frozen=True)
class LifeConfig:
    grid: GridConfig
    seed: Optional[int] = None


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, LifeConfig] = {}
_CACHE_LOCK = threading.RLock()

_DEFAULT_KEY = "default"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives next to the package: gameoflife/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("top-level config must be a mapping")
    return raw


def _parse_life_cfg_from_dict(raw: dict[str, Any]) -> LifeConfig:
    try:
        grid = raw["grid"]
        seed = raw.get("seed")

        cfg = LifeConfig(
            grid=GridConfig(
                rows=int(grid["rows"]),
                cols=int(grid["cols"]),
                alive_probability=float(grid.get("alive_probability", 0.5)),
            ),
            seed=None if seed is None else int(seed),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_grid_config(cfg.grid)
    return cfg


def _validate_grid_config(grid: GridConfig) -> None:
    """Basic sanity checks to fail fast on bad configs."""
    if grid.rows < 0 or grid.cols < 0:
        raise ConfigurationError("grid", "dimensions must be non-negative")

    if not 0.0 <= grid.alive_probability <= 1.0:
        raise ConfigurationError(
            "grid.alive_probability",
            "must be between 0 and 1",
            details={"provided": grid.alive_probability},
        )


def load_config(path: Optional[str] = None) -> LifeConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            gameoflife/config.yaml.

    Returns:
        LifeConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_life_cfg_from_dict(raw=raw)


def get_config() -> LifeConfig:
    """Return the bundled config, loading and caching it on first use.

    THREAD SAFETY: This function is thread-safe.
    """
    with _CACHE_LOCK:
        if _DEFAULT_KEY not in _LOADER_CACHE:
            _LOADER_CACHE[_DEFAULT_KEY] = load_config()
        return _LOADER_CACHE[_DEFAULT_KEY]


def clear_config_cache() -> None:
    """Clear the cached configuration.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
