from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List

from py_ecc.bls import G2Basic
from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.optimized_bls12_381 import Z1, add, curve_order

from unisig.base import SigningAdapter
from unisig.entropy import RandomSource, random_scalar
from unisig.errors import PrimitiveFailure, TypeMismatch
from unisig.registry import registry
from unisig.utils import bytes_to_number_be, ensure_sized_bytes, in_range


@registry.register("classic", "bls12_381", aliases=("bls",))
class Bls12381(SigningAdapter):
    """BLS signatures on BLS12-381: G1 public keys, G2 signatures, basic scheme.

    Private keys are 32-byte big-endian scalars in ``[1, r)``. Signatures and
    public keys can be aggregated.
    """

    name = "bls12_381"
    seed_size = 32
    private_key_size = 32
    public_key_size = 48
    signature_size = 96

    @staticmethod
    def _scalar(private_key: bytes) -> int:
        sk = bytes_to_number_be(private_key)
        if not in_range(sk, 1, curve_order):
            raise PrimitiveFailure("private_key is not a valid BLS12-381 scalar")
        return sk

    def _random_private_key(self, rng: RandomSource) -> bytes:
        return random_scalar(rng, curve_order, self.private_key_size)

    def _public_key(self, private_key: bytes) -> bytes:
        return bytes(G2Basic.SkToPk(self._scalar(private_key)))

    def _sign(self, message: bytes, private_key: bytes) -> bytes:
        return bytes(G2Basic.Sign(self._scalar(private_key), message))

    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        return bool(G2Basic.Verify(public_key, message, signature))

    # -- aggregation ----------------------------------------------------------

    def aggregate_signatures(self, signatures: Sequence[Any]) -> bytes:
        sigs = self._check_batch("signatures", signatures, self.signature_size)
        return bytes(G2Basic.Aggregate(sigs))

    def aggregate_public_keys(self, public_keys: Sequence[Any]) -> bytes:
        pks = self._check_batch("public_keys", public_keys, self.public_key_size)
        point = Z1
        for pk in pks:
            point = add(point, pubkey_to_G1(pk))
        return bytes(G1_to_pubkey(point))

    @staticmethod
    def _check_batch(name: str, items: Sequence[Any], size: int) -> List[bytes]:
        if isinstance(items, (str, bytes, bytearray, memoryview, dict)) or not isinstance(items, Sequence):
            raise TypeMismatch(f"{name} must be a sequence of bytes")
        checked = [ensure_sized_bytes(f"{name}[{i}]", item, size) for i, item in enumerate(items)]
        if not checked:
            raise PrimitiveFailure(f"{name} must not be empty")
        return checked
