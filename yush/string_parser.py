"""Splitting text on a single separator."""

from __future__ import annotations


def split_on(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``.

    Empty text gives no pieces, and a trailing separator does not produce
    a final empty piece.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if not text:
        return []
    parts = text.split(separator)
    if text.endswith(separator):
        parts.pop()
    return parts