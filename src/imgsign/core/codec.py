"""
Binary and text encoding helpers shared by the renderer and the signer.

The proxy verifies signatures over the exact bytes produced here, so every
helper is deterministic and locale independent.
"""

from __future__ import annotations

import base64
import string
from enum import Enum
from typing import Any

from .errors import FormatError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_decode(value: str) -> bytes:
    """Decode a hex string (either case) into bytes.

    Raises:
        FormatError: If the string has an odd number of digits or contains
            characters outside ``[0-9a-fA-F]``.
    """
    if len(value) % 2 == 1:
        raise FormatError(
            "Hex string cannot have an odd number of digits",
            length=len(value),
        )
    bad = sorted({ch for ch in value if ch not in _HEX_DIGITS})
    if bad:
        raise FormatError(
            f"Hex string contains non-hex characters: {''.join(bad)!r}",
        )
    return bytes.fromhex(value)


def urlsafe_b64encode(data: bytes) -> str:
    """Base64 with the URL-safe alphabet and no ``=`` padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def utf8_bytes(value: str) -> bytes:
    return value.encode("utf-8")


def string_to_urlsafe_b64(value: str) -> str:
    """Encode text as UTF-8 and then as unpadded URL-safe base64."""
    return urlsafe_b64encode(utf8_bytes(value))


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def format_number(value: float | int) -> str:
    """Render a number the way it is embedded in a directive token.

    Integers render as decimal text. Floats with an integral value drop the
    fractional part (``2.0`` -> ``"2"``); other floats use the shortest
    round-trip representation (``0.1`` -> ``"0.1"``).
    """
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_text(value: Any) -> str:
    """Render a string-like argument, unwrapping enum members to their value."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


__all__ = [
    "format_bool",
    "format_number",
    "format_text",
    "hex_decode",
    "string_to_urlsafe_b64",
    "urlsafe_b64encode",
    "utf8_bytes",
]
