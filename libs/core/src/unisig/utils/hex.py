from __future__ import annotations

from typing import Any

from ..errors import FormatError, TypeMismatch
from .types import is_bytes, is_hex_string


def to_hex(data: Any) -> str:
    """Lower-case hex encoding of a bytes-like value."""
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    return bytes(data).hex()


def from_hex(text: Any) -> bytes:
    if not isinstance(text, str):
        raise TypeMismatch("Input must be a hex string")
    if not is_hex_string(text):
        raise FormatError("Input must be a hex string")
    return bytes.fromhex(text)
