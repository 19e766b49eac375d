"""ML-DSA (Dilithium) adapters backed by dilithium-py.

The private key is the 32-byte FIPS 204 seed; the expanded signing key is
re-derived from it whenever it is needed.
"""
from __future__ import annotations

from typing import Any, ClassVar

from dilithium_py.ml_dsa import ML_DSA_65, ML_DSA_87

from unisig.base import SigningAdapter
from unisig.registry import registry


class _MLDSA(SigningAdapter):
    scheme: ClassVar[Any]
    seed_size = 32
    private_key_size = 32

    def _public_key(self, private_key: bytes) -> bytes:
        pk, _ = self.scheme.key_derive(private_key)
        return pk

    def _sign(self, message: bytes, private_key: bytes) -> bytes:
        _, sk = self.scheme.key_derive(private_key)
        return self.scheme.sign(sk, message)

    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        try:
            return bool(self.scheme.verify(public_key, message, signature))
        except ValueError:
            return False


@registry.register("pq", "dilithium65")
class Dilithium65(_MLDSA):
    name = "dilithium65"
    scheme = ML_DSA_65
    public_key_size = 1952
    signature_size = 3309


@registry.register("pq", "dilithium87")
class Dilithium87(_MLDSA):
    name = "dilithium87"
    scheme = ML_DSA_87
    public_key_size = 2592
    signature_size = 4627
