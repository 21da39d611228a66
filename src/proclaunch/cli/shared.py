"""Shared CLI presentation helpers."""

import logging
import os
import sys

from proclaunch.models import (
    InputStreamSettings,
    OutputStreamSettings,
    ProcessSettings,
    StreamLocation,
)
from proclaunch.models.stream_settings import UNBOUNDED_BUFFER

BOLD = "\033[1m"
CYAN = "\033[36m"
RESET = "\033[0m"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def format_command(command: list[str]) -> str:
    """Return the argument vector as a prompt-like line, one repr per argument."""
    text = " ".join(repr(arg) for arg in command)
    if supports_color():
        return f"{BOLD}{CYAN}$ {text}{RESET}"
    return f"$ {text}"


def describe_input(settings: InputStreamSettings) -> str:
    if settings.is_neutral:
        return "nothing"
    parts = []
    if StreamLocation.BUFFER in settings.stream_locations:
        size = len(settings.input_buffer or b"")
        parts.append(f"buffer ({size} bytes)")
    if StreamLocation.FILE in settings.stream_locations:
        parts.append(f"file {settings.input_file}")
    if StreamLocation.STANDARD in settings.stream_locations:
        parts.append("standard input")
    return ", ".join(parts)


def describe_output(settings: OutputStreamSettings) -> str:
    if settings.is_neutral:
        return "discarded"
    parts = []
    if StreamLocation.BUFFER in settings.stream_locations:
        if settings.buffer_size == UNBOUNDED_BUFFER:
            parts.append("buffer (unbounded)")
        else:
            parts.append(f"buffer ({settings.buffer_size} bytes)")
    if StreamLocation.FILE in settings.stream_locations:
        mode = "append" if settings.append_file else "overwrite"
        parts.append(f"file {settings.output_file} ({mode})")
    if StreamLocation.STANDARD in settings.stream_locations:
        parts.append("standard output")
    return ", ".join(parts)


def format_summary(settings: ProcessSettings) -> str:
    """Return a multi-line human-readable summary of launch settings."""
    if settings.environment is None:
        environment = "inherited"
    else:
        environment = f"{len(settings.environment)} variables (replaces inherited)"
    if settings.redirect_error_stream:
        stderr = "merged into stdout"
    else:
        stderr = describe_output(settings.stderr_settings)
    lines = [
        f"  {format_command(settings.command)}",
        f"  directory: {settings.directory or '(current)'}",
        f"  environment: {environment}",
        f"  stdin: {describe_input(settings.stdin_settings)}",
        f"  stdout: {describe_output(settings.stdout_settings)}",
        f"  stderr: {stderr}",
    ]
    return "\n".join(lines)
