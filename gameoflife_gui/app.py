"""GUI application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from PySide6 import QtWidgets

from gameoflife.core.simulation_engine import SimulationEngine
from gameoflife.utils.config_loader import get_config, load_config
from gameoflife_gui.backend import EngineBackend
from gameoflife_gui.config import load_gui_config
from gameoflife_gui.controller import SimulationController, SystemMonitor
from gameoflife_gui.view.main_window import MainWindow

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--config", default=None, help="Path to engine config YAML")
    parser.add_argument("--gui-config", default=None, help="Path to GUI config YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the initial grid")
    parser.add_argument("--width", type=int, default=1000, help="Initial window width (px)")
    parser.add_argument("--height", type=int, default=800, help="Initial window height (px)")
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS)
    return parser.parse_args(argv)


def build_controller(args: argparse.Namespace) -> SimulationController:
    life_config = load_config(args.config) if args.config else get_config()
    if args.seed is not None:
        life_config = replace(life_config, seed=args.seed)
    engine = SimulationEngine.from_config(life_config)

    gui_config = load_gui_config(args.gui_config)
    backend = EngineBackend(engine)
    return SimulationController(backend, gui_config, monitor=SystemMonitor())


def run_gui(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    controller = build_controller(args)

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(controller)
    window.resize(args.width, args.height)
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
