"""Arbitrary-precision helpers restricted to non-negative integers."""
from __future__ import annotations

from typing import Any

from ..errors import TypeMismatch


def is_non_negative_int(n: Any) -> bool:
    """True for ``int`` values >= 0 (``bool`` excluded)."""
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


def _require(n: Any, what: str = "Input") -> int:
    if not is_non_negative_int(n):
        raise TypeMismatch(f"{what} must be a non-negative integer")
    return n


def in_range(n: Any, lo: Any, hi: Any) -> bool:
    """``lo <= n < hi`` with every operand a non-negative integer."""
    return is_non_negative_int(n) and is_non_negative_int(lo) and is_non_negative_int(hi) and lo <= n < hi


def assert_in_range(name: str, n: Any, lo: int, hi: int) -> None:
    if not in_range(n, lo, hi):
        raise ValueError(f"{name} must be in range [{lo}, {hi})")


def mod(a: int, b: int) -> int:
    """Euclidean remainder, always in ``[0, b)``."""
    if isinstance(a, bool) or not isinstance(a, int):
        raise TypeMismatch("Dividend must be an integer")
    if not is_non_negative_int(b) or b == 0:
        raise ValueError("Modulus must be a positive integer")
    return a % b


def bit_length(n: int) -> int:
    return _require(n).bit_length()


def get_bit(n: int, pos: int) -> int:
    _require(n, "First argument")
    _require(pos, "Position")
    return (n >> pos) & 1


def set_bit(n: int, pos: int, value: bool) -> int:
    _require(n, "First argument")
    _require(pos, "Position")
    if not isinstance(value, bool):
        raise TypeMismatch("Value must be a boolean")
    mask = 1 << pos
    return n | mask if value else n & ~mask


def bit_mask(n: int) -> int:
    """Mask with the low ``n`` bits set."""
    if not is_non_negative_int(n) or n < 1:
        raise ValueError("Input must be a positive integer")
    return (1 << n) - 1
