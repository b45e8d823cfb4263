"""Named string variables and the host system name."""

from __future__ import annotations

import platform

_SYSTEM_NAMES = {
    "Darwin": "macOS",
    "Linux": "Linux",
    "UNIX": "Unix",
    "FreeBSD": "FreeBSD",
}


def system_name() -> str:
    """Return the shell's name for the operating system it runs on."""
    return _SYSTEM_NAMES.get(platform.system(), "Unknown")


class VariableManager:
    """A mapping of names to string values where unknown names read as ''."""

    def __init__(self) -> None:
        self._variables: dict[str, str] = {}

    def set(self, name: str, value: str) -> VariableManager:
        """Store ``value`` under ``name`` and return self for chaining."""
        self._variables[name] = str(value)
        return self

    def get(self, name: str) -> str:
        """Return the value of ``name``, or an empty string if it is unset."""
        return self._variables.get(name, "")

    def exists(self, name: str) -> bool:
        """Return whether ``name`` has been set."""
        return name in self._variables

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)