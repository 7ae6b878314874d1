"""Utility modules: configuration loading."""

from gameoflife.utils.config_loader import (
    GridConfig,
    LifeConfig,
    clear_config_cache,
    get_config,
    load_config,
)

__all__ = [
    "GridConfig",
    "LifeConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
]
