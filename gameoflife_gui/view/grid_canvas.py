"""Canvas that paints the grid, one square per cell."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from gameoflife.core.grid import GridView
from gameoflife_gui.config import ColorConfig


class GridCanvas(QtWidgets.QWidget):
    def __init__(self, colors: ColorConfig, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._alive_color = QtGui.QColor(colors.alive)
        self._dead_color = QtGui.QColor(colors.dead)
        self._grid: GridView | None = None
        self._cell_size = 1
        self.setSizePolicy(QtWidgets.QSizePolicy.Fixed, QtWidgets.QSizePolicy.Fixed)

    def set_canvas_size(self, width: int, height: int) -> None:
        self.setFixedSize(max(0, width), max(0, height))

    def set_grid(self, grid: GridView | None, cell_size: int) -> None:
        self._grid = grid
        self._cell_size = cell_size
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # type: ignore[override]
        painter = QtGui.QPainter(self)
        try:
            painter.fillRect(self.rect(), self._dead_color)
            if self._grid is None:
                return

            size = self._cell_size
            for row, cells in enumerate(self._grid):
                for col, cell in enumerate(cells):
                    if cell.is_alive:
                        painter.fillRect(
                            QtCore.QRect(col * size, row * size, size, size),
                            self._alive_color,
                        )
        finally:
            painter.end()
