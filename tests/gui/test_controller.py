import pytest

from gameoflife.core.simulation_engine import SimulationEngine
from gameoflife_gui.backend import EngineBackend
from gameoflife_gui.config import DEFAULT_GUI_CONFIG, TimingConfig
from gameoflife_gui.controller import (
    SimulationController,
    SimulationState,
    SystemMonitor,
    canvas_size,
    free_area,
    grid_dimensions,
    speed_to_interval,
)


class FakeMonitor:
    def sample(self):
        return 12.5, 3.0


@pytest.fixture
def backend():
    return EngineBackend(SimulationEngine(seed=99))


@pytest.fixture
def controller(backend):
    ctrl = SimulationController(backend)
    ctrl.window_resized(1000, 500)
    return ctrl


class TestHelpers:
    @pytest.mark.parametrize("speed, expected", [(0, 500), (1, 300), (2, 100)])
    def test_speed_to_interval(self, speed, expected):
        assert speed_to_interval(speed, TimingConfig()) == expected

    def test_speed_to_interval_custom_range(self):
        timing = TimingConfig(shortest_ms=50, longest_ms=250, speed_steps=4)
        assert speed_to_interval(4, timing) == 50
        assert speed_to_interval(1, timing) == 200

    @pytest.mark.parametrize("speed", [-1, 3])
    def test_speed_out_of_range(self, speed):
        with pytest.raises(ValueError):
            speed_to_interval(speed, TimingConfig())

    def test_grid_dimensions_floor(self):
        assert grid_dimensions(305, 149, 15) == (9, 20)

    def test_grid_dimensions_small_canvas(self):
        assert grid_dimensions(5, 5, 10) == (0, 0)

    def test_grid_dimensions_bad_cell_size(self):
        with pytest.raises(ValueError):
            grid_dimensions(100, 100, 0)

    def test_canvas_size(self):
        assert canvas_size(1000, 500, 0.6) == (600, 300)

    def test_free_area_subtracts_bars(self):
        assert free_area(1000, 500, 80) == (1000, 420)

    def test_free_area_never_negative(self):
        assert free_area(300, 50, 80) == (300, 0)

    def test_large_canvas_fits_short_window(self):
        width, height = canvas_size(*free_area(800, 400, 90), 0.9)
        assert height + 90 <= 400
        assert width <= 800


class TestControls:
    def test_defaults(self, controller):
        assert controller.state == SimulationState.PAUSED
        assert not controller.is_running
        assert controller.speed == 1
        assert controller.interval_ms == 300
        assert controller.cell_size == 15
        assert controller.canvas_scale == 0.6

    def test_window_resize_while_paused_applies(self, controller):
        assert controller.window_resized(800, 400)
        assert controller.canvas_size == (480, 240)

    def test_set_canvas_scale(self, controller):
        assert controller.set_canvas_scale(2) == (900, 450)
        assert controller.canvas_size == (900, 450)

    def test_set_cell_size(self, controller):
        controller.set_cell_size(0)
        assert controller.cell_size == 10

    def test_invalid_indexes(self, controller):
        with pytest.raises(ValueError):
            controller.set_cell_size(3)
        with pytest.raises(ValueError):
            controller.set_canvas_scale(-1)

    def test_set_speed(self, controller):
        controller.set_speed(2)
        assert controller.speed == 2
        assert controller.interval_ms == 100

    def test_invalid_speed_keeps_previous(self, controller):
        with pytest.raises(ValueError):
            controller.set_speed(5)
        assert controller.speed == 1


class TestPlayback:
    def test_start_initializes_grid_from_canvas(self, controller, backend):
        rows, cols = controller.start()
        # 60% of 1000x500 is 600x300; 15px cells
        assert (rows, cols) == (20, 40)
        assert backend.snapshot().dimensions == (20, 40)
        assert controller.state == SimulationState.RUNNING

    def test_tick_advances_while_running(self, controller, backend):
        controller.start()
        grid = controller.tick()
        assert grid is not None
        assert backend.generation == 1

    def test_tick_while_paused_does_nothing(self, controller, backend):
        assert controller.tick() is None
        assert not backend.is_initialized

    def test_stop_is_deferred_until_next_tick(self, controller, backend):
        controller.start()
        controller.request_stop()
        assert controller.state == SimulationState.STOPPING
        assert controller.is_running

        assert controller.tick() is not None
        assert controller.state == SimulationState.PAUSED
        assert controller.tick() is None
        assert backend.generation == 1

    def test_request_stop_when_paused_is_noop(self, controller):
        controller.request_stop()
        assert controller.state == SimulationState.PAUSED

    def test_resize_while_running_is_deferred(self, controller, backend):
        controller.start()
        assert not controller.window_resized(2000, 1000)
        assert controller.resize_pending
        assert controller.canvas_size == (600, 300)

        controller.request_stop()
        controller.tick()
        rows, cols = controller.start()
        assert not controller.resize_pending
        assert controller.canvas_size == (1200, 600)
        assert (rows, cols) == (40, 80)

    def test_restart_reinitializes(self, controller, backend):
        controller.start()
        controller.tick()
        controller.request_stop()
        controller.tick()
        controller.set_cell_size(2)
        rows, cols = controller.start()
        assert (rows, cols) == (15, 30)
        assert backend.generation == 0

    @pytest.mark.parametrize(
        "change",
        [
            lambda ctrl: ctrl.set_speed(2),
            lambda ctrl: ctrl.set_cell_size(0),
            lambda ctrl: ctrl.set_canvas_scale(2),
        ],
    )
    def test_controls_locked_while_running(self, controller, change):
        controller.start()
        with pytest.raises(RuntimeError):
            change(controller)
        controller.request_stop()
        with pytest.raises(RuntimeError):
            change(controller)
        assert controller.speed == 1
        assert controller.cell_size == 15
        assert controller.canvas_size == (600, 300)

        controller.tick()
        change(controller)

    def test_start_without_window_size_gives_empty_grid(self, backend):
        controller = SimulationController(backend)
        assert controller.start() == (0, 0)
        assert controller.tick().dimensions == (0, 0)


class TestStatus:
    def test_status_without_monitor(self, controller):
        controller.start()
        controller.tick()
        sample = controller.status()
        assert sample.generation == 1
        assert sample.population == controller.snapshot().population
        assert sample.cpu_percent is None
        assert sample.memory_percent is None

    def test_status_with_monitor(self, backend):
        controller = SimulationController(backend, DEFAULT_GUI_CONFIG, monitor=FakeMonitor())
        sample = controller.status()
        assert sample.cpu_percent == 12.5
        assert sample.memory_percent == 3.0
        assert sample.population == 0

    def test_snapshot_before_start(self, controller):
        assert controller.snapshot() is None

    def test_system_monitor_samples_process(self):
        cpu, mem = SystemMonitor().sample()
        assert cpu >= 0.0
        assert mem >= 0.0
