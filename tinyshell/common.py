"""Text helpers shared by the shells."""

from __future__ import annotations

_BLANK_CHARS = frozenset(" \t\n\r")


def is_blank(text: str) -> bool:
    """Return True if ``text`` is empty or holds only spaces, tabs, CR and LF."""
    return all(ch in _BLANK_CHARS for ch in text)


def split_commands(data: str) -> list[str]:
    """Split input on newlines, dropping empty lines."""
    return [line for line in data.split("\n") if line]


def split_arguments(command: str) -> list[str]:
    """Split a command line on spaces, dropping empty words."""
    return [word for word in command.split(" ") if word]