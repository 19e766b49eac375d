from __future__ import annotations

import hmac
from contextlib import contextmanager
from typing import Any, Iterator

from ..errors import LengthMismatch, TypeMismatch
from .types import is_bytes


def _check_int(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeMismatch("Input must be an integer")
    if n < 0:
        raise ValueError("Input must be a non-negative integer")
    return n


def _check_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValueError("Length must be a positive integer")
    return length


def number_to_bytes_be(n: int, length: int) -> bytes:
    """Fixed-width big-endian encoding; raises ``LengthMismatch`` on overflow."""
    n = _check_int(n)
    length = _check_length(length)
    try:
        return n.to_bytes(length, "big")
    except OverflowError as exc:
        raise LengthMismatch(f"{n} does not fit in {length} bytes") from exc


def number_to_bytes_le(n: int, length: int) -> bytes:
    n = _check_int(n)
    length = _check_length(length)
    try:
        return n.to_bytes(length, "little")
    except OverflowError as exc:
        raise LengthMismatch(f"{n} does not fit in {length} bytes") from exc


def bytes_to_number_be(data: Any) -> int:
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    return int.from_bytes(bytes(data), "big")


def bytes_to_number_le(data: Any) -> int:
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    return int.from_bytes(bytes(data), "little")


def concat_bytes(*parts: Any) -> bytes:
    for part in parts:
        if not is_bytes(part):
            raise TypeMismatch("All inputs must be bytes")
    return b"".join(bytes(p) for p in parts)


def equal_bytes(a: Any, b: Any) -> bool:
    """Compare two buffers without short-circuiting on the first difference."""
    if not is_bytes(a) or not is_bytes(b):
        raise TypeMismatch("Inputs must be bytes")
    return hmac.compare_digest(bytes(a), bytes(b))


@contextmanager
def secret_bytes(data: Any) -> Iterator[bytearray]:
    """Yield a mutable copy of key material and zero it when the block exits."""
    if not is_bytes(data):
        raise TypeMismatch("Input must be bytes")
    buf = bytearray(data)
    try:
        yield buf
    finally:
        for i in range(len(buf)):
            buf[i] = 0
