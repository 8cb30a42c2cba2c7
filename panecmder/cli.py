"""Command-line front door for panecmder.

Parses CLI options, loads the config, sets up file logging and starts the
interactive two-pane browser over the local filesystem.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import DEFAULT_CONFIG_PATH, Config, load_config
from .repo import LocalRepository
from .runtime import run_app

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panecmder",
        description="Browse two directories side by side and copy items between them.",
    )
    parser.add_argument("left_path", nargs="?", default=".", help="Directory shown in the left pane.")
    parser.add_argument(
        "right_path",
        nargs="?",
        default=None,
        help="Directory shown in the right pane. Defaults to the left one.",
    )
    parser.add_argument("--debug", action="store_true", help="Write debug messages to the log file.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to JSON config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(config: Config, debug: bool) -> None:
    """Send log records to the configured log file; stdout belongs to the TUI."""
    level = logging.DEBUG if debug else logging.WARNING
    log_file = config.log_file
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Can't create log directory '{log_file.parent}': {exc}", file=sys.stderr)
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.NullHandler()])
        return
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=str(log_file), encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser on one or two directories."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_logging(config, args.debug)

    left_path = Path(args.left_path)
    right_path = Path(args.right_path) if args.right_path is not None else left_path
    for path in (left_path, right_path):
        if not path.is_dir():
            raise SystemExit(f"Directory not found: {path}")

    logger.info("starting, left: %s, right: %s", left_path, right_path)
    run_app((LocalRepository(left_path), LocalRepository(right_path)), config)
