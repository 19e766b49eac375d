from __future__ import annotations

from typing import Any

from ..errors import FormatError, TypeMismatch
from .types import is_bytes


def from_utf8(text: Any) -> bytes:
    if not isinstance(text, str):
        raise TypeMismatch("Input must be a string")
    return text.encode("utf-8")


def to_utf8(data: Any) -> str:
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Input is not valid UTF-8: {exc.reason}") from exc
