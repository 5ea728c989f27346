"""Whitespace trimming helpers used when reading map data."""

from __future__ import annotations

WHITESPACE = " \n\r\t"


def trim_left(s: str) -> str:
    """Return ``s`` without the leading space, newline, carriage return and tab characters."""
    return s.lstrip(WHITESPACE)


def trim_right(s: str) -> str:
    """Return ``s`` without the trailing space, newline, carriage return and tab characters."""
    return s.rstrip(WHITESPACE)


def trim(s: str) -> str:
    """Return ``s`` trimmed on both sides."""
    return trim_right(trim_left(s))