"""GUI backend interfaces and adapters."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from typing import ContextManager, Protocol

from gameoflife.core.grid import GridView
from gameoflife.interfaces.engine import IEngine


class SimulatorBackend(Protocol):
    """Minimal simulator backend required by the GUI."""

    @property
    def generation(self) -> int:
        ...

    @property
    def population(self) -> int:
        ...

    @property
    def is_initialized(self) -> bool:
        ...

    def initialize(self, num_rows: int, num_cols: int) -> None:
        ...

    def advance(self) -> GridView:
        ...

    def snapshot(self) -> GridView:
        ...


@dataclass
class EngineBackend(SimulatorBackend):
    """Adapter that exposes an engine through the SimulatorBackend interface.

    Every call runs under ``lock`` so a reader on another thread never sees a
    grid halfway through a commit.
    """

    engine: IEngine
    lock: ContextManager | None = None

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()

    @property
    def generation(self) -> int:
        assert self.lock is not None
        with self.lock:
            return self.engine.generation

    @property
    def population(self) -> int:
        assert self.lock is not None
        with self.lock:
            return self.engine.population if self.engine.is_initialized else 0

    @property
    def is_initialized(self) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.engine.is_initialized

    def initialize(self, num_rows: int, num_cols: int) -> None:
        assert self.lock is not None
        with self.lock:
            self.engine.initialize(num_rows, num_cols)

    def advance(self) -> GridView:
        assert self.lock is not None
        with self.lock:
            return self.engine.advance_generation()

    def snapshot(self) -> GridView:
        assert self.lock is not None
        with self.lock:
            return self.engine.grid
