"""Lenient Base64 encoding and decoding for layer data."""

from __future__ import annotations

import base64

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_ALPHABET_SET = frozenset(ALPHABET)


def encode(data: bytes) -> str:
    """Encode bytes as padded standard Base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode Base64 text.

    Decoding stops at the first padding character or at the first character
    outside the Base64 alphabet; whatever follows is ignored. A trailing group
    of a single character yields no byte.
    """
    prefix = []
    for char in text:
        if char == "=" or char not in _ALPHABET_SET:
            break
        prefix.append(char)
    body = "".join(prefix)
    remainder = len(body) % 4
    if remainder == 1:
        body = body[:-1]
    elif remainder:
        body += "=" * (4 - remainder)
    return base64.b64decode(body)