"""Byte, number and message-format helpers (the ``utils`` namespace)."""
from .buffers import (
    bytes_to_number_be,
    bytes_to_number_le,
    concat_bytes,
    equal_bytes,
    number_to_bytes_be,
    number_to_bytes_le,
    secret_bytes,
)
from .format import MESSAGE_HASH_SIZE, format_message, format_message_hash
from .hex import from_hex, to_hex
from .json import from_json, to_json
from .number import (
    assert_in_range,
    bit_length,
    bit_mask,
    get_bit,
    in_range,
    is_non_negative_int,
    mod,
    set_bit,
)
from .types import ensure_bytes, ensure_length, ensure_sized_bytes, is_bytes, is_hex_string
from .utf8 import from_utf8, to_utf8

__all__ = [
    "MESSAGE_HASH_SIZE",
    "assert_in_range",
    "bit_length",
    "bit_mask",
    "bytes_to_number_be",
    "bytes_to_number_le",
    "concat_bytes",
    "ensure_bytes",
    "ensure_length",
    "ensure_sized_bytes",
    "equal_bytes",
    "format_message",
    "format_message_hash",
    "from_hex",
    "from_json",
    "from_utf8",
    "get_bit",
    "in_range",
    "is_bytes",
    "is_hex_string",
    "is_non_negative_int",
    "mod",
    "number_to_bytes_be",
    "number_to_bytes_le",
    "secret_bytes",
    "set_bit",
    "to_hex",
    "to_json",
    "to_utf8",
]
