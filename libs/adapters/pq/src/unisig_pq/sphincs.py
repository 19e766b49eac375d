"""SPHINCS+ (SHA2, simple) adapters backed by PySPX.

Each security level is a family with a ``fast`` and a ``small`` variant; the
family behaves as ``fast`` when used directly. The private key is the full
SPHINCS+ secret key ``SK.seed || SK.prf || PK.seed || PK.root``, so the public
key is its trailing half and never needs the hash tree to be rebuilt.
"""
from __future__ import annotations

from types import ModuleType
from typing import ClassVar

import pyspx.sha2_192f
import pyspx.sha2_192s
import pyspx.sha2_256f
import pyspx.sha2_256s

from unisig.base import SigningAdapter
from unisig.registry import registry


class _Sphincs(SigningAdapter):
    scheme: ClassVar[ModuleType]

    def _private_key_from_seed(self, seed: bytes) -> bytes:
        _, sk = self.scheme.generate_keypair(seed)
        return sk

    def _public_key(self, private_key: bytes) -> bytes:
        return private_key[-self.public_key_size:]

    def _sign(self, message: bytes, private_key: bytes) -> bytes:
        return self.scheme.sign(message, private_key)

    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        return bool(self.scheme.verify(message, signature, public_key))


class _Sphincs192(_Sphincs):
    seed_size = 72
    private_key_size = 96
    public_key_size = 48


class _Sphincs256(_Sphincs):
    seed_size = 96
    private_key_size = 128
    public_key_size = 64


@registry.register("pq", "sphincs192", variant="fast", default=True)
class Sphincs192Fast(_Sphincs192):
    name = "sphincs192.fast"
    scheme = pyspx.sha2_192f
    signature_size = 35664


@registry.register("pq", "sphincs192", variant="small")
class Sphincs192Small(_Sphincs192):
    name = "sphincs192.small"
    scheme = pyspx.sha2_192s
    signature_size = 16224


@registry.register("pq", "sphincs256", variant="fast", default=True)
class Sphincs256Fast(_Sphincs256):
    name = "sphincs256.fast"
    scheme = pyspx.sha2_256f
    signature_size = 49856


@registry.register("pq", "sphincs256", variant="small")
class Sphincs256Small(_Sphincs256):
    name = "sphincs256.small"
    scheme = pyspx.sha2_256s
    signature_size = 29792
