"""JSON <-> bytes helpers.

Serialization is compact (no whitespace) and keeps the mapping's insertion
order, so ``{"a": 1}`` always becomes ``b'{"a":1}'``.
"""
from __future__ import annotations

import json
from typing import Any

from ..errors import FormatError, TypeMismatch
from .types import is_bytes


def dumps_compact(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def from_json(obj: Any) -> bytes:
    """Encode a JSON object (a ``dict``) as UTF-8 bytes."""
    if not isinstance(obj, dict):
        raise TypeMismatch("Input must be a JSON object")
    try:
        return dumps_compact(obj).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise FormatError(f"Input is not JSON serializable: {exc}") from exc


def to_json(data: Any) -> Any:
    """Decode UTF-8 JSON bytes back into Python values."""
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    try:
        return json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FormatError(f"Input is not valid JSON: {exc}") from exc
