"""Simulation engine that owns the grid and advances generations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from gameoflife.core.exceptions import EngineStateError
from gameoflife.core.grid import Grid, GridView
from gameoflife.core.rules import neighbor_counts, next_states
from gameoflife.interfaces.engine import IEngine

if TYPE_CHECKING:
    from gameoflife.utils.config_loader import LifeConfig

logger = logging.getLogger(__name__)


class SimulationEngine(IEngine):
    """Synchronous Game of Life engine.

    The engine starts Uninitialized. initialize() or load() make it Ready;
    advance_generation() is only valid once Ready. Re-initializing discards
    the previous grid entirely.
    """

    def __init__(
        self,
        alive_probability: float = 0.5,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if not 0.0 <= alive_probability <= 1.0:
            raise ValueError("alive_probability must be between 0 and 1")
        self._alive_probability = alive_probability
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._grid: Optional[Grid] = None
        self._generation = 0

    @classmethod
    def from_config(cls, config: "LifeConfig") -> "SimulationEngine":
        """Create an engine using the probability and seed from a config."""
        return cls(alive_probability=config.grid.alive_probability, seed=config.seed)

    @property
    def alive_probability(self) -> float:
        return self._alive_probability

    @property
    def is_initialized(self) -> bool:
        return self._grid is not None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def num_rows(self) -> int:
        return self._require_grid("read dimensions").num_rows

    @property
    def num_cols(self) -> int:
        return self._require_grid("read dimensions").num_cols

    @property
    def dimensions(self) -> tuple[int, int]:
        grid = self._require_grid("read dimensions")
        return grid.num_rows, grid.num_cols

    @property
    def population(self) -> int:
        return self._require_grid("count population").population()

    @property
    def grid(self) -> GridView:
        return self._require_grid("read the grid").view()

    def initialize(self, num_rows: int, num_cols: int) -> None:
        """Replace the grid with a randomly populated num_rows x num_cols grid."""
        self._grid = Grid.random(
            num_rows, num_cols, self._rng, alive_probability=self._alive_probability
        )
        self._generation = 0
        logger.info(
            "Initialized %dx%d grid with %d alive cells",
            num_rows,
            num_cols,
            self._grid.population(),
        )

    def load(self, pattern: Sequence[Sequence[object]]) -> None:
        """Replace the grid with explicit content (truthy cells are alive)."""
        self._grid = Grid.from_pattern(pattern)
        self._generation = 0
        logger.info(
            "Loaded %dx%d pattern", self._grid.num_rows, self._grid.num_cols
        )

    def advance_generation(self) -> GridView:
        """Advance every cell by one generation and return the new grid.

        Next states are computed from the current generation only and then
        committed together, so no cell sees a partially updated neighbor.
        """
        grid = self._require_grid("advance generation")

        alive = grid.alive
        grid.stage(next_states(alive, neighbor_counts(alive)))

        grid.commit()
        self._generation += 1
        logger.debug("Advanced to generation %d", self._generation)
        return grid.view()

    def _require_grid(self, operation: str) -> Grid:
        if self._grid is None:
            raise EngineStateError(operation)
        return self._grid
