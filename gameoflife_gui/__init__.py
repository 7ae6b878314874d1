"""PySide6 front end: renders the grid and drives the engine on a timer.

Qt is only imported by ``gameoflife_gui.app`` and ``gameoflife_gui.view``;
the controller, backend and config modules work without it.
"""
