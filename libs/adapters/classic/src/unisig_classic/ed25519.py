from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from unisig.base import SigningAdapter
from unisig.registry import registry
from unisig.utils import secret_bytes


@registry.register("classic", "ed25519", aliases=("eddsa",))
class Ed25519(SigningAdapter):
    """RFC 8032 Ed25519 via ``cryptography``; the private key is the 32-byte seed."""

    name = "ed25519"
    seed_size = 32
    private_key_size = 32
    public_key_size = 32
    signature_size = 64

    @staticmethod
    def _load(private_key: bytes) -> Ed25519PrivateKey:
        with secret_bytes(private_key) as buf:
            return Ed25519PrivateKey.from_private_bytes(buf)

    def _public_key(self, private_key: bytes) -> bytes:
        return self._load(private_key).public_key().public_bytes_raw()

    def _sign(self, message: bytes, private_key: bytes) -> bytes:
        return self._load(private_key).sign(message)

    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        try:
            Ed25519PublicKey.from_public_bytes(public_key).verify(signature, message)
        except (InvalidSignature, ValueError):
            return False
        return True
