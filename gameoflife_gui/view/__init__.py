from gameoflife_gui.view.control_bar import ControlBar
from gameoflife_gui.view.grid_canvas import GridCanvas
from gameoflife_gui.view.main_window import MainWindow
from gameoflife_gui.view.status_bar import StatusBar

__all__ = [
    "ControlBar",
    "GridCanvas",
    "MainWindow",
    "StatusBar",
]
