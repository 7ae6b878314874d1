"""Main GUI window."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from gameoflife_gui.controller import SimulationController, free_area
from gameoflife_gui.view.control_bar import ControlBar
from gameoflife_gui.view.grid_canvas import GridCanvas
from gameoflife_gui.view.status_bar import StatusBar


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: SimulationController):
        super().__init__()
        self._controller = controller
        config = controller.config

        self.setWindowTitle("Conway's Game of Life")

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self._control_bar = ControlBar(config)
        self._canvas = GridCanvas(config.colors)
        self._status_bar = StatusBar()

        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._control_bar)
        layout.addWidget(self._canvas, 1, QtCore.Qt.AlignCenter)
        layout.addWidget(self._status_bar)

        self._control_bar.speed_changed.connect(self._controller.set_speed)
        self._control_bar.cell_size_changed.connect(self._controller.set_cell_size)
        self._control_bar.canvas_size_changed.connect(self._on_canvas_size_changed)
        self._control_bar.start_stop_clicked.connect(self._on_start_stop)

        # Re-armed after every rendered generation so ticks never overlap.
        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._tick)

        self._control_bar.set_state(self._controller.state)

    def _on_canvas_size_changed(self, index: int) -> None:
        self._canvas.set_canvas_size(*self._controller.set_canvas_scale(index))

    def _on_start_stop(self) -> None:
        if self._controller.is_running:
            self._controller.request_stop()
        else:
            self._controller.start()
            self._canvas.set_canvas_size(*self._controller.canvas_size)
            self._canvas.set_grid(self._controller.snapshot(), self._controller.cell_size)
            self._timer.start(self._controller.interval_ms)
        self._control_bar.set_state(self._controller.state)

    def _tick(self) -> None:
        grid = self._controller.tick()
        if grid is not None:
            self._canvas.set_grid(grid, self._controller.cell_size)

        self._status_bar.update_status(self._controller.status())
        self._control_bar.set_state(self._controller.state)
        if self._controller.is_running:
            self._timer.start(self._controller.interval_ms)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        size = event.size()
        # The canvas shares the window height with both bars.
        reserved = (
            self._control_bar.sizeHint().height() + self._status_bar.sizeHint().height()
        )
        if self._controller.window_resized(*free_area(size.width(), size.height(), reserved)):
            self._canvas.set_canvas_size(*self._controller.canvas_size)
