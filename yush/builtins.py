"""Commands the shell carries out itself."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from yush.string_parser import split_on

if TYPE_CHECKING:
    from yush.shell import Shell

NOT_FOUND = 127

_CYAN = (0, 255, 255)
_WHITE = (255, 255, 255)


def _paint(text: str, rgb: tuple[int, int, int]) -> str:
    red, green, blue = rgb
    return f"\x1b[38;2;{red:03d};{green:03d};{blue:03d}m{text}\x1b[0m"


def builtin_alias(shell: Shell, args: Sequence[str]) -> int:
    """Make ``args[1]`` stand for the command line ``args[2]``."""
    if len(args) != 3:
        shell.err.write("Argument size error.\n")
        return 1
    shell.functions.set(args[1], args[2])
    return 0


def builtin_cd(shell: Shell, args: Sequence[str]) -> int:
    """Change the working directory one path component at a time."""
    if len(args) != 2:
        return 1
    path = args[1]
    current = Path.cwd()
    if path.startswith("/"):
        current = Path(current.anchor)
    for part in split_on(path, "/"):
        if part == ".":
            continue
        if part == "..":
            current = current.parent
        elif part == "~":
            current = Path(shell.vars.get("HOME"))
        else:
            current = current / part
            if not current.is_dir():
                shell.err.write(f"cd: {part} is not a directory.\n")
                return 1
    os.chdir(os.path.normpath(current))
    return 0


def builtin_echo(shell: Shell, args: Sequence[str]) -> int:
    """Print each argument followed by a space, then a newline."""
    shell.out.write("".join(f"{arg} " for arg in args[1:]) + "\n")
    return 0


def builtin_function(shell: Shell, args: Sequence[str]) -> int:
    """Define ``args[1]`` as a function whose body is the remaining words."""
    if len(args) < 2:
        shell.err.write("Argument size error.\n")
        return 1
    shell.functions.set(args[1], " ".join(args[2:]))
    return 0


def builtin_if(shell: Shell, args: Sequence[str]) -> int:
    """Check that a condition has enough arguments."""
    if len(args) < 4:
        shell.err.write("if: not enough arguments\n")
        return 1
    return 0


def builtin_ls(shell: Shell, args: Sequence[str]) -> int:
    """List the visible entries of the working directory."""
    try:
        cwd = Path.cwd()
    except FileNotFoundError:
        cwd = None
    if cwd is None or not cwd.exists():
        shell.err.write("This directory is not exists.\n")
        return 1
    pieces = []
    for entry in sorted(cwd.iterdir(), key=lambda item: item.name):
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            pieces.append(_paint(entry.name, _CYAN) + "/")
        else:
            pieces.append(_paint(entry.name, _WHITE))
        pieces.append("\t")
    shell.out.write("".join(pieces) + "\n")
    return 0


def builtin_pwd(shell: Shell, args: Sequence[str]) -> int:
    """Print the working directory."""
    shell.out.write(f"{os.getcwd()}\n")
    return 0


def builtin_set(shell: Shell, args: Sequence[str]) -> int:
    """Set the variable ``args[1]`` to ``args[2]``."""
    if len(args) != 3:
        shell.err.write("Argument size error.\n")
        return 1
    shell.vars.set(args[1], args[2])
    return 0


_BUILTINS: dict[str, Callable[[Shell, Sequence[str]], int]] = {
    "alias": builtin_alias,
    "cd": builtin_cd,
    "echo": builtin_echo,
    "function": builtin_function,
    "if": builtin_if,
    "ls": builtin_ls,
    "pwd": builtin_pwd,
    "set": builtin_set,
}


def run_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Run the builtin named by ``args[0]``; 127 if there is none."""
    if not args:
        return NOT_FOUND
    handler = _BUILTINS.get(args[0])
    if handler is None:
        return NOT_FOUND
    return handler(shell, args)