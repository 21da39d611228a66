"""Command-line interface for proclaunch."""

from proclaunch.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
