"""Core modules for the Game of Life simulator.

- grid: cell storage and read-only grid snapshots
- rules: neighbor counting and the transition rule
- simulation_engine: grid ownership and generation advancement
- exceptions: error hierarchy
"""

from gameoflife.core.exceptions import ConfigurationError, EngineStateError, LifeError
from gameoflife.core.grid import CellState, Grid, GridView
from gameoflife.core.rules import (
    NEIGHBOR_OFFSETS,
    count_alive_neighbors,
    neighbor_counts,
    next_state,
    next_states,
)
from gameoflife.core.simulation_engine import SimulationEngine

__all__ = [
    # Grid storage
    "CellState",
    "Grid",
    "GridView",
    # Rules
    "NEIGHBOR_OFFSETS",
    "count_alive_neighbors",
    "neighbor_counts",
    "next_state",
    "next_states",
    # Engine
    "SimulationEngine",
    # Errors
    "LifeError",
    "ConfigurationError",
    "EngineStateError",
]
