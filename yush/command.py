"""A command line and its splitting into arguments."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Protocol

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class _Lookup(Protocol):
    def get(self, name: str) -> str: ...

    def exists(self, name: str) -> bool: ...


class AliasLoopError(ValueError):
    """Raised when aliases expand into one another without end."""


@dataclass
class Command:
    """A line of shell input and the arguments parsed from it."""

    text: str = ""
    args: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return whether the command line is empty."""
        return not self.text

    def parse(self, variables: _Lookup, functions: _Lookup) -> list[str]:
        """Split the line into arguments and return them.

        A line that names a function as a whole is replaced by its body
        first. ``$NAME`` expands to the variable's value as an argument of
        its own, quotes group text, and ``#`` ends the line.
        """
        seen: set[str] = set()
        while functions.exists(self.text):
            if self.text in seen:
                raise AliasLoopError(f"alias loop through {self.text!r}")
            seen.add(self.text)
            self.text = functions.get(self.text)
        self.args = _split(self.text, variables)
        return self.args


def _split(text: str, variables: _Lookup) -> list[str]:
    args: list[str] = []
    double_quote: int | None = None
    single_quote: int | None = None
    begin: int | None = None
    i = 0
    while i < len(text):
        char = text[i]
        if (
            char == " "
            and begin is not None
            and double_quote is None
            and single_quote is None
        ):
            args.append(text[begin:i])
            begin = None
        elif char == "$":
            if begin is not None:
                args.append(text[begin:i])
                begin = None
            end = i + 1
            while end < len(text) and text[end] in _NAME_CHARS:
                end += 1
            args.append(variables.get(text[i + 1 : end]))
            i = end
            continue
        elif char == '"':
            if double_quote is None:
                double_quote = i
            else:
                args.append(text[double_quote + 1 : i])
                begin = None
                double_quote = None
        elif char == "'":
            if single_quote is None:
                single_quote = i
            else:
                args.append(text[single_quote + 1 : i])
                begin = None
                single_quote = None
        elif char == "#":
            break
        elif begin is None:
            begin = i
        i += 1

    if begin is not None:
        args.append(text[begin:])
    return args