from __future__ import annotations

import re
from typing import Any

from ..errors import LengthMismatch, TypeMismatch

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def is_bytes(value: Any) -> bool:
    """True for bytes-like buffers (``bytes``, ``bytearray``, ``memoryview``)."""
    return isinstance(value, (bytes, bytearray, memoryview))


def is_hex_string(value: Any) -> bool:
    """True when ``value`` is a str of even length made only of hex digits."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def ensure_bytes(name: str, value: Any) -> bytes:
    """Return ``value`` as immutable bytes or raise ``TypeMismatch``."""
    if not is_bytes(value):
        raise TypeMismatch(f"{name} must be bytes")
    return bytes(value)


def ensure_length(name: str, value: bytes, expected: int) -> bytes:
    if len(value) != expected:
        raise LengthMismatch(f"{name} must be {expected} bytes, got {len(value)}")
    return value


def ensure_sized_bytes(name: str, value: Any, expected: int) -> bytes:
    """Type check first, then length check."""
    return ensure_length(name, ensure_bytes(name, value), expected)
