"""Randomness providers injected into key generation.

Adapters never reach for a global RNG directly; they hold a ``RandomSource``
(``SYSTEM_RANDOM`` unless told otherwise) and every key-generation call may
override it with ``rng=``.
"""
from __future__ import annotations

import hashlib
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def random_bytes(self, n: int) -> bytes: ...


class SystemRandom:
    """Operating-system CSPRNG via :mod:`secrets`."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandom()"


class DeterministicRandom:
    """Reproducible byte stream expanded from a seed with SHAKE-256.

    Intended for tests and audits of entropy use; the output is only as secret
    as the seed. Each call consumes a fresh block keyed by an internal counter.
    """

    def __init__(self, seed: bytes) -> None:
        if not isinstance(seed, (bytes, bytearray)) or not seed:
            raise ValueError("seed must be non-empty bytes")
        self._seed = bytes(seed)
        self._counter = 0

    def random_bytes(self, n: int) -> bytes:
        block = hashlib.shake_256(self._seed + self._counter.to_bytes(8, "big")).digest(n)
        self._counter += 1
        return block


SYSTEM_RANDOM = SystemRandom()


def random_scalar(rng: RandomSource, order: int, length: int) -> bytes:
    """Uniform scalar in ``[1, order)`` as ``length`` big-endian bytes.

    Draws are masked to the bit length of ``order`` and rejected until one
    lands in range.
    """
    mask = (1 << order.bit_length()) - 1
    while True:
        candidate = int.from_bytes(rng.random_bytes(length), "big") & mask
        if 1 <= candidate < order:
            return candidate.to_bytes(length, "big")
