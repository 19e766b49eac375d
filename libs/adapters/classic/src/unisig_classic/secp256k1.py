from __future__ import annotations

import hashlib

from ecdsa import SECP256k1

from unisig.registry import registry

from ._ecdsa import EcdsaAdapter


@registry.register("classic", "secp256k1", aliases=("ecdsa",))
class Secp256k1(EcdsaAdapter):
    """Bitcoin-style ECDSA.

    Accepts any message shape. A normalized message of exactly 32 bytes is
    taken as the digest; anything else is hashed with SHA-256 first.
    Signatures are low-S and verification rejects high-S encodings.
    """

    name = "secp256k1"
    curve = SECP256k1
    hashfunc = hashlib.sha256
    low_s = True
    seed_size = 32
    private_key_size = 32
    public_key_size = 33
    signature_size = 64

    def _digest(self, message: bytes) -> bytes:
        if len(message) == 32:
            return message
        return hashlib.sha256(message).digest()
