"""Conway's Game of Life transition rule.

Each cell looks at its eight neighbors (fewer at the edges of the grid):

     Number of
      Alive    | Now:
     Neighbors | Alive  Dead
         0-1   |   D      D  : underpopulation
           2   |   A      D  : unchanged
           3   |   A      A  : stay alive/come alive
         4-8   |   D      D  : overpopulation
"""

from __future__ import annotations

import numpy as np

from gameoflife.core.grid import Grid

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if not (d_row == 0 and d_col == 0)
)

MAX_NEIGHBORS = len(NEIGHBOR_OFFSETS)


def count_alive_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count alive cells among the in-bounds neighbors of (row, col)."""
    return sum(
        grid.alive_at(row + d_row, col + d_col) for d_row, d_col in NEIGHBOR_OFFSETS
    )


def neighbor_counts(alive: np.ndarray) -> np.ndarray:
    """Count alive neighbors for every cell at once.

    The board is padded with a ring of dead cells, so edge cells see nothing
    beyond the border.
    """
    num_rows, num_cols = alive.shape
    padded = np.pad(alive.astype(np.uint8), 1)
    counts = np.zeros((num_rows, num_cols), dtype=np.uint8)
    for d_row, d_col in NEIGHBOR_OFFSETS:
        counts += padded[
            1 + d_row : 1 + d_row + num_rows, 1 + d_col : 1 + d_col + num_cols
        ]
    return counts


def next_state(is_alive: bool, alive_neighbors: int) -> bool:
    """Return the state of a cell in the next generation."""
    if not 0 <= alive_neighbors <= MAX_NEIGHBORS:
        raise ValueError(
            f"alive_neighbors must be between 0 and {MAX_NEIGHBORS}, got {alive_neighbors}"
        )
    if alive_neighbors == 2:
        return is_alive
    return alive_neighbors == 3


def next_states(alive: np.ndarray, counts: np.ndarray) -> np.ndarray:
    """Vectorized next_state over a whole board."""
    return (counts == 3) | ((counts == 2) & alive)
