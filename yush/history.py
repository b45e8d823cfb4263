"""Command history kept in memory and appended to a file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

_HISTORY_DIR = Path(".local/share/yush")
_HISTORY_FILE = _HISTORY_DIR / "history"


class History:
    """An ordered list of entered commands backed by a history file."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self.directory: Path = _HISTORY_DIR
        self.file: Path = _HISTORY_FILE

    def prepare(self, home: str | Path) -> bool:
        """Place the history under ``home``, creating its directory.

        Returns whether the history file already exists.
        """
        home = Path(home)
        self.directory = home / _HISTORY_DIR
        self.file = home / _HISTORY_FILE
        if not self.directory.is_dir():
            self.directory.mkdir(parents=True, exist_ok=True)
        return self.file.exists()

    def load(self) -> None:
        """Append every line of the history file to the history."""
        self._entries.extend(self.file.read_text().splitlines())

    def save(self) -> None:
        """Append the whole history to the history file."""
        with self.file.open("a") as stream:
            for command in self._entries:
                stream.write(command + "\n")

    def add(self, command: str) -> None:
        """Record a command."""
        self._entries.append(command)

    def last(self) -> str:
        """Return the most recent command."""
        if not self._entries:
            raise IndexError("history is empty")
        return self._entries[-1]

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)