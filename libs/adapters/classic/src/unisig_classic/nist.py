"""NIST P-256/P-384/P-521 ECDSA over caller-supplied digests.

These adapters never hash: the message must already be a digest whose length
matches the curve order size (32, 48 and 66 bytes).
"""
from __future__ import annotations

import hashlib

from ecdsa import NIST256p, NIST384p, NIST521p

from unisig.registry import registry

from ._ecdsa import EcdsaAdapter


@registry.register("classic", "p256")
class P256(EcdsaAdapter):
    name = "p256"
    curve = NIST256p
    hashfunc = hashlib.sha256
    seed_size = 32
    private_key_size = 32
    public_key_size = 33
    signature_size = 64
    digest_size = 32


@registry.register("classic", "p384")
class P384(EcdsaAdapter):
    name = "p384"
    curve = NIST384p
    hashfunc = hashlib.sha384
    seed_size = 48
    private_key_size = 48
    public_key_size = 49
    signature_size = 96
    digest_size = 48


@registry.register("classic", "p521")
class P521(EcdsaAdapter):
    name = "p521"
    curve = NIST521p
    hashfunc = hashlib.sha512
    seed_size = 66
    private_key_size = 66
    public_key_size = 67
    signature_size = 132
    digest_size = 66
