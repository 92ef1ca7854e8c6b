from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from PySide6 import QtWidgets

from .window import MainWindow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive three-body gravity simulator")
    start = parser.add_mutually_exclusive_group()
    start.add_argument("--scenario", default=None, help="built-in scenario id (e.g. figure_eight)")
    start.add_argument("--seed", type=int, default=None, help="start from a random scenario with this seed")
    start.add_argument("--load", type=Path, default=None, help="scenario JSON file to open")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args, qt_args = build_parser().parse_known_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    window = MainWindow(scenario_id=args.scenario, seed=args.seed, path=args.load)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
