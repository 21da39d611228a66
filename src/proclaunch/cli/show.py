"""`proclaunch show` command implementation."""

import argparse
import logging
import sys
from pathlib import Path

from proclaunch import __version__
from proclaunch.cli.shared import configure_logging, format_summary
from proclaunch.config import get_settings_path, load_settings

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the show command."""
    parser = argparse.ArgumentParser(
        prog="proclaunch show",
        description="Validate a launch file and print what it would run",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Launch file to read (default: $PROCLAUNCH_FILE or ./proclaunch.json)",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute the show command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    path = args.file or get_settings_path()
    try:
        settings = load_settings(path)
    except FileNotFoundError:
        print(f"Error: launch file not found: {path}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read launch file {path}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        log.debug("validation failed for %s", path, exc_info=True)
        print(f"Error: invalid launch file {path}: {e}", file=sys.stderr)
        return 1

    print(f"\n{format_summary(settings)}\n")
    return 0
