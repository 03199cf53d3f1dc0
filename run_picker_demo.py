#!/usr/bin/env python3
"""Launcher for the date/time picker demo (PySide6)."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists() and SRC.as_posix() not in sys.path:
    sys.path.insert(0, SRC.as_posix())

from datetime_picker.core.errors import ConfigurationError
from datetime_picker.engine import PickerConfig, load_config


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open a date/time picker and print the result.")
    parser.add_argument("--config", type=Path, help="JSON picker configuration")
    parser.add_argument("--mode", choices=["date", "time", "datetime"], default="date")
    parser.add_argument("--min", dest="min_datetime", help="ISO-8601 lower bound")
    parser.add_argument("--max", dest="max_datetime", help="ISO-8601 upper bound")
    parser.add_argument("--initial", dest="initial_datetime", help="ISO-8601 initial value")
    parser.add_argument("--minute-divider", type=int, default=1)
    parser.add_argument("--format", dest="date_format", help="Display pattern, e.g. 'yyyy-MMMM-dd'")
    parser.add_argument("--locale", default="en_us")
    parser.add_argument("--dark", action="store_true", help="Use the dark palette")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            config = load_config(args.config)
        else:
            options = {
                key: value
                for key, value in vars(args).items()
                if key not in ("config", "verbose", "dark") and value is not None
            }
            config = PickerConfig.from_dict(options)
    except ConfigurationError as e:
        print(f"Invalid picker configuration: {e}", file=sys.stderr)
        return 2

    from PySide6.QtWidgets import QApplication
    from datetime_picker.gui import show_date_picker
    from datetime_picker.gui.styles.theme import set_dark_mode

    set_dark_mode(args.dark)

    app = QApplication.instance() or QApplication(sys.argv)
    result = show_date_picker(None, config)
    if result is None:
        print("cancelled")
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
