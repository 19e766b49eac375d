"""Elliptic-curve Diffie-Hellman over X25519 and the NIST prime curves.

The ``ecdh`` family defaults to X25519. NIST variants take big-endian scalars,
publish SEC1 compressed points and return the x-coordinate of the shared
point as the secret.
"""
from __future__ import annotations

from typing import ClassVar

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from ecdsa import NIST256p, NIST384p, NIST521p

from unisig.base import KeyExchangeAdapter
from unisig.entropy import RandomSource, random_scalar
from unisig.errors import PrimitiveFailure
from unisig.registry import registry
from unisig.utils import bytes_to_number_be, secret_bytes


@registry.register("kex", "ecdh", variant="x25519", default=True)
class X25519(KeyExchangeAdapter):
    name = "ecdh.x25519"
    seed_size = 32
    private_key_size = 32
    public_key_size = 32
    shared_secret_size = 32

    @staticmethod
    def _load(private_key: bytes) -> X25519PrivateKey:
        with secret_bytes(private_key) as buf:
            return X25519PrivateKey.from_private_bytes(buf)

    def _public_key(self, private_key: bytes) -> bytes:
        return self._load(private_key).public_key().public_bytes_raw()

    def _derive(self, private_key: bytes, peer_public_key: bytes) -> bytes:
        peer = X25519PublicKey.from_public_bytes(peer_public_key)
        try:
            return self._load(private_key).exchange(peer)
        except ValueError as exc:
            raise PrimitiveFailure("peer_public_key yields an all-zero shared secret") from exc


class _NistEcdh(KeyExchangeAdapter):
    curve: ClassVar[ec.EllipticCurve]
    order: ClassVar[int]

    def _random_private_key(self, rng: RandomSource) -> bytes:
        return random_scalar(rng, self.order, self.private_key_size)

    def _load(self, private_key: bytes) -> ec.EllipticCurvePrivateKey:
        try:
            return ec.derive_private_key(bytes_to_number_be(private_key), self.curve)
        except ValueError as exc:
            raise PrimitiveFailure(f"private_key is not a valid {self.name} scalar") from exc

    def _public_key(self, private_key: bytes) -> bytes:
        return self._load(private_key).public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)

    def _derive(self, private_key: bytes, peer_public_key: bytes) -> bytes:
        private = self._load(private_key)
        try:
            peer = ec.EllipticCurvePublicKey.from_encoded_point(self.curve, peer_public_key)
        except ValueError as exc:
            raise PrimitiveFailure(f"peer_public_key is not a point on {self.name}") from exc
        return private.exchange(ec.ECDH(), peer)


@registry.register("kex", "ecdh", variant="p256")
class EcdhP256(_NistEcdh):
    name = "ecdh.p256"
    curve = ec.SECP256R1()
    order = NIST256p.order
    seed_size = 32
    private_key_size = 32
    public_key_size = 33
    shared_secret_size = 32


@registry.register("kex", "ecdh", variant="p384")
class EcdhP384(_NistEcdh):
    name = "ecdh.p384"
    curve = ec.SECP384R1()
    order = NIST384p.order
    seed_size = 48
    private_key_size = 48
    public_key_size = 49
    shared_secret_size = 48


@registry.register("kex", "ecdh", variant="p521")
class EcdhP521(_NistEcdh):
    name = "ecdh.p521"
    curve = ec.SECP521R1()
    order = NIST521p.order
    seed_size = 66
    private_key_size = 66
    public_key_size = 67
    shared_secret_size = 66
