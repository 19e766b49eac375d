"""Message normalization.

Callers of a multi-algorithm library should not need to know whether an
algorithm wants a digest or a message. ``format_message`` turns the three
accepted shapes into bytes; adapters that need a pre-hashed digest apply their
own fixed-length check on top.
"""
from __future__ import annotations

from typing import Any

from ..errors import MESSAGE_SHAPES, FormatError, LengthMismatch, TypeMismatch
from .hex import from_hex
from .json import dumps_compact
from .types import is_bytes, is_hex_string

MESSAGE_HASH_SIZE = 32


def format_message(message: Any) -> bytes:
    """Convert bytes, str or dict input into canonical message bytes.

    - bytes-like values are returned unchanged (as ``bytes``)
    - strings matching the strict hex pattern are hex-decoded, any other
      string is UTF-8 encoded
    - dicts are serialized to compact JSON and UTF-8 encoded
    """
    if is_bytes(message):
        return bytes(message)
    if isinstance(message, str):
        if is_hex_string(message):
            return from_hex(message)
        return message.encode("utf-8")
    if isinstance(message, dict):
        try:
            return dumps_compact(message).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise FormatError(MESSAGE_SHAPES) from exc
    raise TypeMismatch(MESSAGE_SHAPES)


def format_message_hash(message_hash: Any) -> bytes:
    """Return a 32-byte digest given as bytes or as a hex string."""
    if is_bytes(message_hash):
        digest = bytes(message_hash)
    elif isinstance(message_hash, str):
        if not is_hex_string(message_hash):
            raise FormatError(MESSAGE_SHAPES)
        digest = from_hex(message_hash)
    else:
        raise TypeMismatch(MESSAGE_SHAPES)
    if len(digest) != MESSAGE_HASH_SIZE:
        raise LengthMismatch(f"Message hash must be {MESSAGE_HASH_SIZE} bytes, got {len(digest)}")
    return digest
