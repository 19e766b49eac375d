"""Capability contracts every adapter satisfies.

Adapters implement these Protocols (by inheriting the base classes in
``unisig.base``) and register themselves into the global registry. Callers
interact only with these interfaces, never with primitive providers directly.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .entropy import RandomSource


@dataclass(frozen=True)
class KeyPair:
    private_key: bytes
    public_key: bytes


@dataclass(frozen=True)
class Encapsulation:
    ciphertext: bytes
    shared_secret: bytes


@runtime_checkable
class KeyGeneration(Protocol):
    """Deterministic-from-seed key derivation."""
    name: str
    def generate_private_key(self, seed: Optional[bytes] = None, *, rng: Optional[RandomSource] = None) -> bytes: ...
    def generate_key_pair(self, seed: Optional[bytes] = None, *, rng: Optional[RandomSource] = None) -> KeyPair: ...
    def get_public_key(self, private_key: bytes) -> bytes: ...


@runtime_checkable
class Signing(KeyGeneration, Protocol):
    """Digital signature contract."""
    def sign(self, message: Any, private_key: bytes) -> bytes: ...
    def verify(self, signature: bytes, message: Any, public_key: bytes) -> bool: ...


@runtime_checkable
class KeyExchange(KeyGeneration, Protocol):
    """Diffie-Hellman style shared-secret derivation."""
    def derive_shared_secret(self, private_key: bytes, peer_public_key: bytes) -> bytes: ...


@runtime_checkable
class KeyEncapsulation(KeyGeneration, Protocol):
    """Key Encapsulation Mechanism contract."""
    def encapsulate(self, public_key: bytes) -> Encapsulation: ...
    def decapsulate(self, ciphertext: bytes, private_key: bytes) -> bytes: ...
