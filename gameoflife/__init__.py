"""Conway's Game of Life simulator.

The core is a headless engine: initialize a grid, then advance it one
generation at a time and read the resulting snapshot.

Getting started:
    from gameoflife import SimulationEngine

    engine = SimulationEngine(seed=42)
    engine.initialize(20, 30)
    grid = engine.advance_generation()
    grid[0][0].is_alive
"""

from gameoflife.core.exceptions import ConfigurationError, EngineStateError, LifeError
from gameoflife.core.grid import CellState, GridView
from gameoflife.core.simulation_engine import SimulationEngine
from gameoflife.interfaces.engine import IEngine
from gameoflife.utils.config_loader import LifeConfig, get_config, load_config

__all__ = [
    # Engine
    "IEngine",
    "SimulationEngine",
    "GridView",
    "CellState",
    # Configuration
    "LifeConfig",
    "get_config",
    "load_config",
    # Errors
    "LifeError",
    "ConfigurationError",
    "EngineStateError",
]
