"""Grid storage for the Game of Life engine.

The grid is a fixed-size, row-major rectangle of cells held in two boolean
arrays: ``alive`` for the current generation and ``next_alive`` for the
transition being computed. Positions outside the rectangle do not exist:
lookups there read as dead and never wrap around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class CellState:
    """Read-only cell state handed to callers."""

    is_alive: bool


ALIVE = CellState(True)
DEAD = CellState(False)


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")


class GridView:
    """Immutable snapshot of a grid, readable by row and column index.

    ``view[row][col].is_alive`` reads one cell. The snapshot does not change
    when the engine advances to later generations.
    """

    __slots__ = ("_rows", "_num_cols")

    def __init__(self, rows: Iterable[Iterable[bool]], num_cols: int = 0):
        self._rows: tuple[tuple[CellState, ...], ...] = tuple(
            tuple(ALIVE if alive else DEAD for alive in row) for row in rows
        )
        if self._rows:
            num_cols = len(self._rows[0])
            if any(len(row) != num_cols for row in self._rows):
                raise ValueError("grid rows must all have the same length")
        self._num_cols = num_cols

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    @property
    def population(self) -> int:
        return sum(cell.is_alive for row in self._rows for cell in row)

    def is_alive(self, row: int, col: int) -> bool:
        return self._rows[row][col].is_alive

    def to_lists(self) -> list[list[bool]]:
        return [[cell.is_alive for cell in row] for row in self._rows]

    def __getitem__(self, row: int) -> tuple[CellState, ...]:
        return self._rows[row]

    def __iter__(self) -> Iterator[tuple[CellState, ...]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridView):
            return NotImplemented
        return self.dimensions == other.dimensions and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((self.dimensions, self._rows))

    def __repr__(self) -> str:
        return (
            f"GridView(rows={self.num_rows}, cols={self.num_cols}, "
            f"population={self.population})"
        )


class Grid:
    """Mutable cell storage with fixed dimensions.

    The array shape carries the dimensions, so a grid with zero rows still
    remembers its column count.
    """

    def __init__(self, num_rows: int, num_cols: int, alive: Optional[np.ndarray] = None):
        _check_dimension("num_rows", num_rows)
        _check_dimension("num_cols", num_cols)
        if alive is None:
            alive = np.zeros((num_rows, num_cols), dtype=bool)
        elif alive.shape != (num_rows, num_cols):
            raise ValueError(
                f"cell storage {alive.shape} does not match dimensions {num_rows}x{num_cols}"
            )
        self._alive = np.asarray(alive, dtype=bool).copy()
        self._next_alive = np.zeros((num_rows, num_cols), dtype=bool)

    @classmethod
    def random(
        cls,
        num_rows: int,
        num_cols: int,
        rng: np.random.Generator,
        alive_probability: float = 0.5,
    ) -> "Grid":
        """Build a grid where each cell is alive with the given probability."""
        _check_dimension("num_rows", num_rows)
        _check_dimension("num_cols", num_cols)
        alive = rng.random((num_rows, num_cols)) < alive_probability
        return cls(num_rows, num_cols, alive)

    @classmethod
    def from_pattern(cls, pattern: Sequence[Sequence[object]]) -> "Grid":
        """Build a grid from rows of truthy (alive) and falsy (dead) values."""
        rows = [[bool(value) for value in row] for row in pattern]
        num_cols = len(rows[0]) if rows else 0
        if any(len(row) != num_cols for row in rows):
            raise ValueError("pattern rows must all have the same length")
        alive = np.array(rows, dtype=bool).reshape(len(rows), num_cols)
        return cls(len(rows), num_cols, alive)

    @property
    def num_rows(self) -> int:
        return self._alive.shape[0]

    @property
    def num_cols(self) -> int:
        return self._alive.shape[1]

    @property
    def alive(self) -> np.ndarray:
        """Current generation as a read-only boolean array."""
        view = self._alive.view()
        view.flags.writeable = False
        return view

    @property
    def next_alive(self) -> np.ndarray:
        """Staged next generation as a read-only boolean array."""
        view = self._next_alive.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def alive_at(self, row: int, col: int) -> int:
        """Return 1 if the cell at (row, col) is alive, else 0.

        Out-of-bounds positions count as dead.
        """
        if not self.in_bounds(row, col):
            return 0
        return int(self._alive[row, col])

    def is_alive(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return bool(self._alive[row, col])

    def stage(self, next_alive: np.ndarray) -> None:
        """Record the next generation without touching the current one."""
        if next_alive.shape != self._alive.shape:
            raise ValueError(
                f"next state {next_alive.shape} does not match grid {self._alive.shape}"
            )
        self._next_alive[...] = next_alive

    def commit(self) -> None:
        """Apply the staged next generation and clear it."""
        self._alive[...] = self._next_alive
        self._next_alive[...] = False

    def population(self) -> int:
        return int(np.count_nonzero(self._alive))

    def view(self) -> GridView:
        return GridView(self._alive.tolist(), num_cols=self.num_cols)
