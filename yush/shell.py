"""The shell: variables, functions, history, prompt and command execution."""

from __future__ import annotations

import os
import re
import signal
import subprocess
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from yush.builtins import NOT_FOUND, run_builtin
from yush.command import AliasLoopError, Command
from yush.history import History
from yush.string_parser import split_on
from yush.variables import VariableManager, system_name

_RC_FILE = Path(".config/yush/config.yush")
_CONFIG_DIR = Path(".config/yush")

_ORANGE = (255, 165, 0)
_CYAN = (0, 255, 255)
_VIOLET = (238, 130, 238)
_RED = (255, 0, 0)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ShellError(RuntimeError):
    """Raised when the shell cannot be set up."""


def _paint(text: str, rgb: tuple[int, int, int]) -> str:
    red, green, blue = rgb
    return f"\x1b[38;2;{red:03d};{green:03d};{blue:03d}m{text}\x1b[0m"


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@contextmanager
def _raw_terminal(stream: TextIO) -> Iterator[None]:
    """Turn off line buffering and echo while inside, if ``stream`` is a tty."""
    try:
        is_tty = stream.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    if not is_tty:
        yield
        return
    import termios

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


@contextmanager
def _sigint_ignored() -> Iterator[None]:
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        yield
        return
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _restore_sigint() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)


class Shell:
    """An interactive or scripted command interpreter."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.vars = VariableManager()
        self.functions = VariableManager()
        self.history = History()
        self.runtime_status = 0
        self.at_eof = False

        self.vars.set("SYSTEM", system_name()).set("SHELL", "yush")
        for key, value in (os.environ if environ is None else environ).items():
            self.vars.set(key, value)

        if not self.vars.get("HOME"):
            self.err.write("Error: HOME is not set\n")
            raise ShellError("HOME is not set")
        self.home = Path(self.vars.get("HOME"))

        config_dir = self.home / _CONFIG_DIR
        if not config_dir.is_dir():
            self.err.write("Error: yush config dir path is not exists\n")
            self.out.write("Auto creating config dir\n")
            config_dir.mkdir(parents=True, exist_ok=True)

        rc_file = self.home / _RC_FILE
        if rc_file.exists():
            self.run_script(rc_file)

        self.history.prepare(self.home)

    def _parse(self, command: Command) -> bool:
        try:
            command.parse(self.vars, self.functions)
        except AliasLoopError as error:
            self.err.write(f"Error: {error}\n")
            self.runtime_status = 1
            return False
        return True

    def run_interactive(self, interactive: bool) -> int:
        """Read and run commands until end of input or ``exit``."""
        with _sigint_ignored():
            while True:
                if interactive:
                    self.prompt()
                    text = self.read_line()
                else:
                    text = self._read_plain_line()
                command = Command(text)
                if self._parse(command) and not command.is_empty():
                    if command.args and command.args[0] == "exit":
                        if len(command.args) > 1:
                            return _atoi(command.args[1])
                        break
                    self.runtime_status = self.exec_cmd(command)
                    self.history.add(command.text)
                if self.at_eof:
                    break
        self.history.save()
        return self.runtime_status

    def run_script(self, path: str | Path) -> int:
        """Run every command of a script file."""
        for command in self.read_script(path):
            if command.is_empty():
                continue
            if self._parse(command):
                self.runtime_status = self.exec_cmd(command)
            self.history.add(command.text)
        return self.runtime_status

    def read_script(self, path: str | Path) -> list[Command]:
        """Read a script into commands, joining lines that end in a backslash."""
        path = Path(path)
        if not path.exists():
            self.err.write(f"Error: script file `{path}` not found\n")
            return []
        lines = iter(path.read_text().split("\n"))
        commands = []
        for line in lines:
            while line.endswith("\\"):
                following = next(lines, None)
                if following is None:
                    break
                line += following
            commands.append(Command(line))
        return commands

    def exec_cmd(self, command: Command) -> int:
        """Run a parsed command: a function, a builtin or a program."""
        args = command.args
        if not args:
            return 0
        if self.functions.exists(args[0]):
            status = 0
            for line in split_on(self.functions.get(args[0]), "\n"):
                inner = Command(line)
                if not self._parse(inner):
                    return 1
                status = self.exec_cmd(inner)
            return status
        status = run_builtin(self, args)
        if status != NOT_FOUND:
            return status
        return self.exec_file(command)

    def exec_file(self, command: Command) -> int:
        """Run a program found directly or on PATH; 127 if none is found."""
        args = command.args
        if not args:
            return NOT_FOUND
        name = args[0]
        program = None
        if Path(name).is_file():
            program = name
        else:
            for directory in split_on(self.vars.get("PATH"), ":"):
                candidate = Path(directory) / name
                if candidate.is_file():
                    program = os.path.normpath(candidate)
                    break
        if program is None:
            return NOT_FOUND
        preexec = _restore_sigint if os.name == "posix" else None
        try:
            completed = subprocess.run(
                list(args), executable=program, preexec_fn=preexec, check=False
            )
        except OSError as error:
            self.err.write(f"Error: {error}\n")
            return -1
        return completed.returncode

    def prompt(self) -> int:
        """Write the prompt and return the last command's status."""
        cwd = os.getcwd()
        home = self.vars.get("HOME")
        location = f"~{cwd[len(home):]}" if cwd.startswith(home) else cwd
        parts = [
            _paint(self.vars.get("USER"), _ORANGE),
            "@",
            _paint(f"{self.vars.get('NAME')} ", _CYAN),
            _paint(f"{location}\n", _VIOLET),
        ]
        if self.runtime_status != 0:
            parts.append(_paint(f"{self.runtime_status} > ", _RED))
        else:
            parts.append("> ")
        self.out.write("".join(parts))
        self.out.flush()
        return self.runtime_status

    def read_line(self) -> str:
        """Read one line with cursor movement, deletion and history recall."""
        with _raw_terminal(self.stdin):
            return self._edit_line()

    def _write(self, text: str) -> None:
        if text:
            self.out.write(text)
            self.out.flush()

    def _erase(self, text: str, cursor: int) -> None:
        self._write("\x1b[C" * (len(text) - cursor) + "\b \b" * len(text))

    def _edit_line(self) -> str:
        text = ""
        cursor = 0
        index = len(self.history)
        while True:
            char = self.stdin.read(1)
            if not char:
                self.at_eof = True
                return text
            if char == "\x1b":
                key1 = self.stdin.read(1)
                key2 = self.stdin.read(1)
                if key1 != "[":
                    continue
                if key2 == "A":
                    if index == 0:
                        continue
                    self._erase(text, cursor)
                    index -= 1
                    text = self.history[index]
                    cursor = len(text)
                    self._write(text)
                elif key2 == "B":
                    if index == len(self.history):
                        continue
                    self._erase(text, cursor)
                    index += 1
                    text = "" if index == len(self.history) else self.history[index]
                    cursor = len(text)
                    self._write(text)
                elif key2 == "C":
                    if cursor == len(text):
                        continue
                    self._write("\x1b[C")
                    cursor += 1
                elif key2 == "D":
                    if cursor == 0:
                        continue
                    self._write("\x1b[D")
                    cursor -= 1
            elif char in ("\b", "\x7f"):
                if cursor == 0:
                    continue
                cursor -= 1
                text = text[:cursor] + text[cursor + 1 :]
                self._write(f"\b{text[cursor:]} " + "\x1b[D" * (len(text) + 1 - cursor))
            elif char == "\n":
                self._write("\n")
                return text
            else:
                text = text[:cursor] + char + text[cursor:]
                self._write(text[cursor:])
                cursor += 1
                self._write("\x1b[D" * (len(text) - cursor))

    def _read_plain_line(self) -> str:
        line = self.stdin.readline()
        if line.endswith("\n"):
            return line[:-1]
        self.at_eof = True
        return line