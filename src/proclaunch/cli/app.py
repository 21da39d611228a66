"""Top-level CLI router."""

import sys

from . import new as new_cmd
from . import show as show_cmd


def main(argv: list[str] | None = None) -> int:
    """Route to `new` or `show`; `show` is the default."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "new":
        return new_cmd.run(args[1:])
    if args and args[0] == "show":
        return show_cmd.run(args[1:])
    return show_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
