"""
Command-line entry point.

Usage: bidsort [CSV_PATH]

With no argument the configured default file is loaded.
"""

import argparse
import sys
from typing import Optional

import structlog

from .config.loader import ConfigLoader, load_config
from .driver import MenuSession, run_menu
from .errors import ConfigurationError
from .logging.config import configure_logging

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bidsort",
        description="Load bids from a CSV file and compare selection sort with quicksort.",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        default=None,
        help="CSV file to load (default: configured csv.default_path)",
    )
    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin=None,
    stdout=None,
    loader: Optional[ConfigLoader] = None
) -> int:
    """Run the interactive bid sorting menu; returns the process exit code."""
    args = build_parser().parse_args(argv)

    loader = loader or ConfigLoader.create()
    try:
        config = load_config(loader)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        for error in e.errors:
            print(f"  {error.field}: {error.message} (value: {error.value!r})", file=sys.stderr)
        return 2

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )

    csv_path = args.csv_path or config.csv.default_path
    logger.info("Starting bid sorting session", csv_path=csv_path, config_dir=str(loader.config_dir))

    session = MenuSession(csv_path=csv_path, config=config)
    return run_menu(session, stdin, stdout)


if __name__ == "__main__":
    sys.exit(main())
