"""Simulation controller (Presenter-ish, framework-agnostic).

Owns the playback state machine of the GUI: which cell size, canvas size and
speed are selected, when the grid gets (re)initialized, and when a stop
request actually takes effect.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

import psutil  # type: ignore[import-untyped]

from gameoflife.core.grid import GridView
from gameoflife_gui.backend import SimulatorBackend
from gameoflife_gui.config import DEFAULT_GUI_CONFIG, GuiConfig, TimingConfig

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    PAUSED = auto()
    RUNNING = auto()
    STOPPING = auto()


@dataclass
class StatusSample:
    generation: int
    population: int
    cpu_percent: float | None
    memory_percent: float | None


def speed_to_interval(speed: int, timing: TimingConfig) -> int:
    """Map a speed setting to the delay between generations (in msecs).

        Speed          |  Delay
      0 (slowest)      |  longest_ms
        ...            |  ...
      speed_steps      |  shortest_ms
    """
    if not 0 <= speed <= timing.speed_steps:
        raise ValueError(f"speed must be between 0 and {timing.speed_steps}")
    span = timing.longest_ms - timing.shortest_ms
    return round(timing.longest_ms - (speed * span) / timing.speed_steps)


def grid_dimensions(canvas_width: int, canvas_height: int, cell_size: int) -> tuple[int, int]:
    """Return the (rows, cols) of whole cells that fit on the canvas."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    return max(0, canvas_height) // cell_size, max(0, canvas_width) // cell_size


def canvas_size(window_width: int, window_height: int, scale: float) -> tuple[int, int]:
    """Return the canvas (width, height) for a window and a scale fraction."""
    return int(scale * window_width), int(scale * window_height)


def free_area(window_width: int, window_height: int, reserved_height: int) -> tuple[int, int]:
    """Return the (width, height) left for the canvas once the bars are placed."""
    return max(0, window_width), max(0, window_height - reserved_height)


class SystemMonitor:
    """Process-level CPU/memory monitoring."""

    def __init__(self):
        self._proc = psutil.Process()
        self._proc.cpu_percent(interval=None)

    def sample(self) -> tuple[float, float]:
        return (
            float(self._proc.cpu_percent(interval=None)),
            float(self._proc.memory_percent()),
        )


class SimulationController:
    """Coordinator for stepping the engine and tracking playback controls."""

    def __init__(
        self,
        backend: SimulatorBackend,
        config: GuiConfig = DEFAULT_GUI_CONFIG,
        monitor: SystemMonitor | None = None,
    ):
        self._backend = backend
        self._config = config
        self._monitor = monitor
        self._state = SimulationState.PAUSED
        self._speed = config.defaults.speed
        self._cell_size_index = config.defaults.cell_size
        self._canvas_scale_index = config.defaults.canvas_size
        self._interval_ms = speed_to_interval(self._speed, config.timing)
        self._window_size: tuple[int, int] = (0, 0)
        self._canvas_size: tuple[int, int] = (0, 0)
        self._resize_pending = False

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state != SimulationState.PAUSED

    @property
    def config(self) -> GuiConfig:
        return self._config

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def cell_size(self) -> int:
        return self._config.cell_sizes[self._cell_size_index]

    @property
    def canvas_scale(self) -> float:
        return self._config.canvas_scales[self._canvas_scale_index]

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self._canvas_size

    @property
    def resize_pending(self) -> bool:
        return self._resize_pending

    def set_speed(self, speed: int) -> None:
        self._require_paused("speed")
        self._interval_ms = speed_to_interval(speed, self._config.timing)
        self._speed = speed

    def set_cell_size(self, index: int) -> None:
        self._require_paused("cell size")
        if not 0 <= index < len(self._config.cell_sizes):
            raise ValueError(f"Unknown cell size index: {index}")
        self._cell_size_index = index

    def set_canvas_scale(self, index: int) -> tuple[int, int]:
        """Select a canvas size and apply it to the last known window size."""
        self._require_paused("canvas size")
        if not 0 <= index < len(self._config.canvas_scales):
            raise ValueError(f"Unknown canvas size index: {index}")
        self._canvas_scale_index = index
        return self._apply_canvas_size()

    def window_resized(self, window_width: int, window_height: int) -> bool:
        """Record a new window size.

        Returns True when the canvas was resized now. While running the
        resize is deferred to the next start().
        """
        self._window_size = (window_width, window_height)
        if self.is_running:
            self._resize_pending = True
            logger.debug("Window resized while running; canvas resize deferred")
            return False
        self._apply_canvas_size()
        return True

    def start(self) -> tuple[int, int]:
        """Initialize a fresh random grid that fills the canvas and start playback.

        Returns the (rows, cols) of the new grid.
        """
        if self._resize_pending or self._canvas_size == (0, 0):
            self._apply_canvas_size()
            self._resize_pending = False

        rows, cols = grid_dimensions(*self._canvas_size, self.cell_size)
        self._backend.initialize(rows, cols)
        self._interval_ms = speed_to_interval(self._speed, self._config.timing)
        self._state = SimulationState.RUNNING
        logger.info(
            "Started %dx%d grid, cell size %dpx, %dms per generation",
            rows,
            cols,
            self.cell_size,
            self._interval_ms,
        )
        return rows, cols

    def request_stop(self) -> None:
        """Ask playback to stop; honored after the next tick renders."""
        if self._state == SimulationState.RUNNING:
            self._state = SimulationState.STOPPING

    def tick(self) -> GridView | None:
        """Advance one generation if playing.

        Returns the new grid, or None while paused. A pending stop request
        takes effect after the generation produced here.
        """
        if self._state == SimulationState.PAUSED:
            return None

        grid = self._backend.advance()
        if self._state == SimulationState.STOPPING:
            self._state = SimulationState.PAUSED
            logger.info("Stopped at generation %d", self._backend.generation)
        return grid

    def snapshot(self) -> GridView | None:
        if not self._backend.is_initialized:
            return None
        return self._backend.snapshot()

    def status(self) -> StatusSample:
        cpu_percent: float | None = None
        memory_percent: float | None = None
        if self._monitor is not None:
            cpu_percent, memory_percent = self._monitor.sample()
        return StatusSample(
            generation=self._backend.generation,
            population=self._backend.population,
            cpu_percent=cpu_percent,
            memory_percent=memory_percent,
        )

    def _require_paused(self, control: str) -> None:
        if self.is_running:
            raise RuntimeError(f"Cannot change {control} while the simulation is running")

    def _apply_canvas_size(self) -> tuple[int, int]:
        self._canvas_size = canvas_size(*self._window_size, self.canvas_scale)
        return self._canvas_size
