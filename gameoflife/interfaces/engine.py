"""Engine abstraction - behavioral contract.

An engine owns a grid and moves it forward one generation at a time. The GUI
backend only talks to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gameoflife.core.grid import GridView


class IEngine(ABC):
    """Interface shared by simulation engines and the GUI backend."""

    @abstractmethod
    def initialize(self, num_rows: int, num_cols: int) -> None:
        """Replace the grid with a randomly populated one."""
        ...

    @abstractmethod
    def advance_generation(self) -> GridView:
        """Advance the whole grid by one generation and return it."""
        ...

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """Whether a grid exists."""
        ...

    @property
    @abstractmethod
    def generation(self) -> int:
        """Number of generations advanced since the last initialization."""
        ...

    @property
    @abstractmethod
    def grid(self) -> GridView:
        """Snapshot of the current generation."""
        ...

    @property
    def dimensions(self) -> tuple[int, int]:
        """Current (num_rows, num_cols)."""
        return self.grid.dimensions

    @property
    def population(self) -> int:
        """Number of alive cells in the current generation."""
        return self.grid.population
