"""`proclaunch new` command implementation."""

import argparse
import sys
from pathlib import Path

from proclaunch import __version__
from proclaunch.cli.shared import configure_logging, format_summary
from proclaunch.config import get_settings_path, save_settings
from proclaunch.models import InputStreamSettings, OutputStreamSettings, ProcessSettings
from proclaunch.models.stream_settings import UNBOUNDED_BUFFER


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the new command."""
    parser = argparse.ArgumentParser(
        prog="proclaunch new",
        description="Write a launch file for PROGRAM and its arguments",
        epilog="Put -- before PROGRAM when any of its arguments start with a dash.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Launch file to write (default: $PROCLAUNCH_FILE or ./proclaunch.json)",
    )
    parser.add_argument("-C", "--directory", type=Path, help="Working directory for the process")
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set an environment variable; replaces the inherited environment (repeatable)",
    )
    parser.add_argument(
        "--clear-env",
        action="store_true",
        help="Run with an empty environment plus any --env variables",
    )
    parser.add_argument(
        "--redirect-error-stream",
        action="store_true",
        help="Merge stderr into stdout",
    )
    parser.add_argument("--stdin-file", type=Path, help="Feed stdin from this file")
    parser.add_argument("--stdin-text", help="Feed this text to stdin")
    parser.add_argument("--stdout-file", type=Path, help="Write stdout to this file")
    parser.add_argument("--stderr-file", type=Path, help="Write stderr to this file")
    parser.add_argument(
        "--append",
        action="store_true",
        help="Append to --stdout-file/--stderr-file instead of overwriting",
    )
    parser.add_argument("--capture-stdout", action="store_true", help="Capture stdout in memory")
    parser.add_argument("--capture-stderr", action="store_true", help="Capture stderr in memory")
    parser.add_argument("command", nargs="+", metavar="PROGRAM [ARGS...]")
    return parser


def parse_env_assignments(parser: argparse.ArgumentParser, items: list[str]) -> dict[str, str]:
    """Split KEY=VALUE items; a missing '=' or empty key is a usage error."""
    env: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            parser.error(f"--env expects KEY=VALUE, got {item!r}")
        env[key] = value
    return env


def build_output_settings(
    path: Path | None, append: bool, capture: bool
) -> OutputStreamSettings | None:
    if path is None and not capture:
        return None
    settings = OutputStreamSettings()
    if path is not None:
        settings.set_output_file(path, append=append)
    if capture:
        settings.set_buffer_size(UNBOUNDED_BUFFER)
    return settings


def build_settings(parser: argparse.ArgumentParser, args: argparse.Namespace) -> ProcessSettings:
    """Turn parsed arguments into ProcessSettings."""
    env = parse_env_assignments(parser, args.env)
    environment = env if env or args.clear_env else None

    stdin_settings = None
    if args.stdin_file is not None or args.stdin_text is not None:
        stdin_settings = InputStreamSettings()
        if args.stdin_file is not None:
            stdin_settings.set_input_file(args.stdin_file)
        if args.stdin_text is not None:
            stdin_settings.set_input_buffer(args.stdin_text)

    return ProcessSettings(
        args.command,
        redirect_error_stream=args.redirect_error_stream,
        directory=args.directory,
        environment=environment,
        stdin_settings=stdin_settings,
        stdout_settings=build_output_settings(args.stdout_file, args.append, args.capture_stdout),
        stderr_settings=build_output_settings(args.stderr_file, args.append, args.capture_stderr),
    )


def run(argv: list[str]) -> int:
    """Execute the new command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    if args.redirect_error_stream and (args.stderr_file is not None or args.capture_stderr):
        print(
            "Warning: stderr settings are ignored when --redirect-error-stream is set",
            file=sys.stderr,
        )

    settings = build_settings(parser, args)
    try:
        path = save_settings(settings, args.output or get_settings_path())
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nLaunch settings saved to {path}")
    print(f"{format_summary(settings)}\n")
    return 0
