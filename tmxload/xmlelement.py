"""Typed attribute access on an XML element."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET

_INT_RE = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1


def _leading_int(text: str, name: str) -> tuple[str, int]:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"attribute {name!r} is not an integer: {text!r}")
    return match.group(1), int(match.group(2))


class XMLElement:
    """Reads attributes of an element as integers, floats or strings.

    Numeric attributes are read from their leading numeric part; trailing text
    is ignored. A value with no numeric prefix, or one out of range, raises
    ``ValueError``.
    """

    def __init__(self, node: ET.Element) -> None:
        self.node = node

    def get_int(self, name: str, default: int = 0) -> int:
        """Return the attribute as a signed 32-bit integer, or ``default`` if absent."""
        value = self.node.get(name)
        if value is None:
            return default
        sign, magnitude = _leading_int(value, name)
        result = -magnitude if sign == "-" else magnitude
        if not _INT_MIN <= result <= _INT_MAX:
            raise ValueError(f"attribute {name!r} is out of range: {value!r}")
        return result

    def get_unsigned_int(self, name: str, default: int = 0) -> int:
        """Return the attribute as an unsigned 32-bit integer, or ``default`` if absent.

        A leading minus sign wraps the value around, as unsigned conversion does.
        """
        value = self.node.get(name)
        if value is None:
            return default
        sign, magnitude = _leading_int(value, name)
        if magnitude > _UINT_MAX:
            raise ValueError(f"attribute {name!r} is out of range: {value!r}")
        if sign == "-":
            return (-magnitude) & _UINT_MAX
        return magnitude

    def get_float(self, name: str, default: float = 0.0) -> float:
        """Return the attribute as a float, or ``default`` if absent."""
        value = self.node.get(name)
        if value is None:
            return default
        match = _FLOAT_RE.match(value)
        if match is None:
            raise ValueError(f"attribute {name!r} is not a number: {value!r}")
        result = float(match.group(1))
        if math.isinf(result) and "inf" not in match.group(1).lower():
            raise ValueError(f"attribute {name!r} is out of range: {value!r}")
        return result

    def get_string(self, name: str, default: str | None = "") -> str | None:
        """Return the attribute text, or ``default`` if absent."""
        value = self.node.get(name)
        return default if value is None else value

    def get_value(self, default: str = "") -> str:
        """Return the element's text content, or ``default`` if it has none."""
        text = self.node.text
        return default if text is None else text