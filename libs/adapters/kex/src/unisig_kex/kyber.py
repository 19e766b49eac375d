"""ML-KEM (Kyber) adapters backed by kyber-py.

The private key is the 64-byte ``d || z`` seed from FIPS 203; the
decapsulation key is re-derived from it on every call. Encapsulation draws its
message randomness inside the provider.
"""
from __future__ import annotations

from typing import Any, ClassVar, Tuple

from kyber_py.ml_kem import ML_KEM_768, ML_KEM_1024

from unisig.base import KemAdapter
from unisig.registry import registry


class _MLKEM(KemAdapter):
    scheme: ClassVar[Any]
    seed_size = 64
    private_key_size = 64
    shared_secret_size = 32

    def _public_key(self, private_key: bytes) -> bytes:
        ek, _ = self.scheme.key_derive(private_key)
        return ek

    def _encapsulate(self, public_key: bytes) -> Tuple[bytes, bytes]:
        shared_secret, ciphertext = self.scheme.encaps(public_key)
        return ciphertext, shared_secret

    def _decapsulate(self, ciphertext: bytes, private_key: bytes) -> bytes:
        _, dk = self.scheme.key_derive(private_key)
        return self.scheme.decaps(dk, ciphertext)


@registry.register("kex", "kyber768")
class Kyber768(_MLKEM):
    name = "kyber768"
    scheme = ML_KEM_768
    public_key_size = 1184
    ciphertext_size = 1088


@registry.register("kex", "kyber1024")
class Kyber1024(_MLKEM):
    name = "kyber1024"
    scheme = ML_KEM_1024
    public_key_size = 1568
    ciphertext_size = 1568
