"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from yush.command import AliasLoopError, Command
from yush.shell import Shell, ShellError

VERSION = "0.6.5"


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"not a boolean: {text!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yush", description="Young's shell", add_help=False
    )
    parser.add_argument(
        "-o", "--debug-output", type=Path,
        help="Enable debug message output to a file",
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Print help message and exit"
    )
    parser.add_argument("-c", "--command", help="Execute single command")
    parser.add_argument(
        "-i", "--interactive", type=_parse_bool, nargs="?", const=True,
        default=True, help="Is interactive mode",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Print version and exit"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell and return its exit status."""
    parser = _build_parser()
    options, unmatched = parser.parse_known_args(argv)

    if options.help:
        sys.stdout.write(parser.format_help())
        return 0
    if options.version:
        sys.stdout.write(f"yush, version {VERSION}\n")
        return 0

    try:
        shell = Shell()
    except ShellError:
        return 1

    if options.command is not None:
        command = Command(options.command)
        try:
            command.parse(shell.vars, shell.functions)
        except AliasLoopError as error:
            sys.stderr.write(f"Error: {error}\n")
            return 1
        return shell.exec_cmd(command)

    if unmatched:
        return shell.run_script(unmatched[0])

    return shell.run_interactive(options.interactive)


if __name__ == "__main__":
    sys.exit(main())