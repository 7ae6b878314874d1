"""Top bar with playback controls: speed, cell size, canvas size, start/stop."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from gameoflife_gui.config import GuiConfig
from gameoflife_gui.controller import SimulationState

_SIZE_LABELS = ("Small", "Medium", "Large")


def _size_label(index: int) -> str:
    return _SIZE_LABELS[index] if index < len(_SIZE_LABELS) else f"Size {index + 1}"


class ControlBar(QtWidgets.QFrame):
    speed_changed = QtCore.Signal(int)
    cell_size_changed = QtCore.Signal(int)
    canvas_size_changed = QtCore.Signal(int)
    start_stop_clicked = QtCore.Signal()

    def __init__(self, config: GuiConfig, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._speed = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self._speed.setRange(0, config.timing.speed_steps)
        self._speed.setValue(config.defaults.speed)
        self._speed.valueChanged.connect(self.speed_changed)

        self._cell_size = QtWidgets.QComboBox()
        for index, size in enumerate(config.cell_sizes):
            self._cell_size.addItem(f"{_size_label(index)} ({size}px)")
        self._cell_size.setCurrentIndex(config.defaults.cell_size)
        self._cell_size.currentIndexChanged.connect(self.cell_size_changed)

        self._canvas_size = QtWidgets.QComboBox()
        for index, scale in enumerate(config.canvas_scales):
            self._canvas_size.addItem(f"{_size_label(index)} ({scale:.0%})")
        self._canvas_size.setCurrentIndex(config.defaults.canvas_size)
        self._canvas_size.currentIndexChanged.connect(self.canvas_size_changed)

        self._start_stop = QtWidgets.QPushButton("Start")
        self._start_stop.clicked.connect(self._on_start_stop_clicked)

        self._state_label = QtWidgets.QLabel("Paused")

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.addWidget(QtWidgets.QLabel("Speed"))
        layout.addWidget(self._speed)
        layout.addWidget(QtWidgets.QLabel("Cell size"))
        layout.addWidget(self._cell_size)
        layout.addWidget(QtWidgets.QLabel("Canvas size"))
        layout.addWidget(self._canvas_size)
        layout.addWidget(self._start_stop)
        layout.addStretch(1)
        layout.addWidget(self._state_label)

    def _on_start_stop_clicked(self) -> None:
        self.start_stop_clicked.emit()

    def set_state(self, state: SimulationState) -> None:
        paused = state == SimulationState.PAUSED
        self._start_stop.setText("Start" if paused else "Stop")
        self._start_stop.setEnabled(state != SimulationState.STOPPING)
        for control in (self._speed, self._cell_size, self._canvas_size):
            control.setEnabled(paused)

        if state == SimulationState.RUNNING:
            label = "Running"
        elif state == SimulationState.STOPPING:
            label = "Stopping"
        else:
            label = "Paused"
        self._state_label.setText(label)
