"""Shared validation skeleton for algorithm adapters.

Every public method follows the same order: type checks for all arguments,
then length checks, then message normalization, then delegation to the
primitive provider through a ``_``-prefixed hook the concrete adapter
implements. Adapter instances carry only class-level constants and the random
source chosen at construction, so a single instance can be shared freely.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from .entropy import SYSTEM_RANDOM, RandomSource
from .errors import MESSAGE_SHAPES, TypeMismatch
from .interfaces import Encapsulation, KeyPair
from .utils.format import format_message
from .utils.types import ensure_bytes, ensure_length, is_bytes


class BaseAdapter(ABC):
    name: ClassVar[str] = ""
    seed_size: ClassVar[int]
    private_key_size: ClassVar[int]
    public_key_size: ClassVar[int]

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng = rng if rng is not None else SYSTEM_RANDOM

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    # -- key generation -----------------------------------------------------

    def generate_private_key(self, seed: Optional[bytes] = None, *, rng: Optional[RandomSource] = None) -> bytes:
        """Private key from ``seed`` (used verbatim) or from fresh entropy."""
        if seed is not None:
            seed = ensure_bytes("seed", seed)
            ensure_length("seed", seed, self.seed_size)
            return self._private_key_from_seed(seed)
        return self._random_private_key(rng if rng is not None else self._rng)

    def generate_key_pair(self, seed: Optional[bytes] = None, *, rng: Optional[RandomSource] = None) -> KeyPair:
        private_key = self.generate_private_key(seed, rng=rng)
        return KeyPair(private_key=private_key, public_key=self._public_key(private_key))

    def get_public_key(self, private_key: Any) -> bytes:
        return self._public_key(self._check_private_key(private_key))

    def _private_key_from_seed(self, seed: bytes) -> bytes:
        return seed

    def _random_private_key(self, rng: RandomSource) -> bytes:
        return self._private_key_from_seed(rng.random_bytes(self.seed_size))

    @abstractmethod
    def _public_key(self, private_key: bytes) -> bytes: ...

    # -- validation helpers -------------------------------------------------

    def _check_private_key(self, private_key: Any) -> bytes:
        private_key = ensure_bytes("private_key", private_key)
        return ensure_length("private_key", private_key, self.private_key_size)


class SigningAdapter(BaseAdapter):
    """Base for ``Signing`` adapters.

    ``digest_size`` switches the adapter to digest-only mode: the message must
    be raw bytes of exactly that length and is never normalized.
    """

    signature_size: ClassVar[int]
    digest_size: ClassVar[Optional[int]] = None

    def sign(self, message: Any, private_key: Any) -> bytes:
        self._check_message_type(message)
        private_key = ensure_bytes("private_key", private_key)
        ensure_length("private_key", private_key, self.private_key_size)
        data = self._prepare_message(message)
        return self._sign(data, private_key)

    def verify(self, signature: Any, message: Any, public_key: Any) -> bool:
        signature = ensure_bytes("signature", signature)
        self._check_message_type(message)
        public_key = ensure_bytes("public_key", public_key)
        ensure_length("signature", signature, self.signature_size)
        ensure_length("public_key", public_key, self.public_key_size)
        data = self._prepare_message(message)
        return self._verify(signature, data, public_key)

    def _check_message_type(self, message: Any) -> None:
        if self.digest_size is not None:
            if not is_bytes(message):
                raise TypeMismatch("message must be bytes")
        elif not (is_bytes(message) or isinstance(message, (str, dict))):
            raise TypeMismatch(MESSAGE_SHAPES)

    def _prepare_message(self, message: Any) -> bytes:
        if self.digest_size is not None:
            return ensure_length("message", bytes(message), self.digest_size)
        return format_message(message)

    @abstractmethod
    def _sign(self, message: bytes, private_key: bytes) -> bytes: ...

    @abstractmethod
    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool: ...


class KeyExchangeAdapter(BaseAdapter):
    """Base for Diffie-Hellman style ``KeyExchange`` adapters."""

    shared_secret_size: ClassVar[int]

    def derive_shared_secret(self, private_key: Any, peer_public_key: Any) -> bytes:
        private_key = ensure_bytes("private_key", private_key)
        peer_public_key = ensure_bytes("peer_public_key", peer_public_key)
        ensure_length("private_key", private_key, self.private_key_size)
        ensure_length("peer_public_key", peer_public_key, self.public_key_size)
        return self._derive(private_key, peer_public_key)

    @abstractmethod
    def _derive(self, private_key: bytes, peer_public_key: bytes) -> bytes: ...


class KemAdapter(BaseAdapter):
    """Base for ``KeyEncapsulation`` adapters."""

    ciphertext_size: ClassVar[int]
    shared_secret_size: ClassVar[int]

    def encapsulate(self, public_key: Any) -> Encapsulation:
        public_key = ensure_bytes("public_key", public_key)
        ensure_length("public_key", public_key, self.public_key_size)
        ciphertext, shared_secret = self._encapsulate(public_key)
        return Encapsulation(ciphertext=ciphertext, shared_secret=shared_secret)

    def decapsulate(self, ciphertext: Any, private_key: Any) -> bytes:
        ciphertext = ensure_bytes("ciphertext", ciphertext)
        private_key = ensure_bytes("private_key", private_key)
        ensure_length("ciphertext", ciphertext, self.ciphertext_size)
        ensure_length("private_key", private_key, self.private_key_size)
        return self._decapsulate(ciphertext, private_key)

    @abstractmethod
    def _encapsulate(self, public_key: bytes) -> tuple[bytes, bytes]: ...

    @abstractmethod
    def _decapsulate(self, ciphertext: bytes, private_key: bytes) -> bytes: ...
