from __future__ import annotations

from typing import Any, Callable, ClassVar

from ecdsa import BadSignatureError, SigningKey, VerifyingKey
from ecdsa.curves import Curve
from ecdsa.errors import MalformedPointError
from ecdsa.util import sigdecode_string, sigencode_string, sigencode_string_canonize

from unisig.base import SigningAdapter
from unisig.entropy import RandomSource, random_scalar
from unisig.errors import PrimitiveFailure


class EcdsaAdapter(SigningAdapter):
    """ECDSA over a short-Weierstrass curve using python-ecdsa.

    Private keys are big-endian scalars of the curve's byte length, public keys
    are SEC1 compressed points and signatures are compact ``r || s``. Nonces
    follow RFC 6979, so signing is deterministic.
    """

    curve: ClassVar[Curve]
    hashfunc: ClassVar[Callable[..., Any]]
    low_s: ClassVar[bool] = False

    def _random_private_key(self, rng: RandomSource) -> bytes:
        return random_scalar(rng, self.curve.order, self.private_key_size)

    def _signing_key(self, private_key: bytes) -> SigningKey:
        try:
            return SigningKey.from_string(private_key, curve=self.curve, hashfunc=self.hashfunc)
        except MalformedPointError as exc:
            raise PrimitiveFailure(f"private_key is not a valid {self.name} scalar") from exc

    def _public_key(self, private_key: bytes) -> bytes:
        return self._signing_key(private_key).get_verifying_key().to_string("compressed")

    def _digest(self, message: bytes) -> bytes:
        return message

    def _sign(self, message: bytes, private_key: bytes) -> bytes:
        sigencode = sigencode_string_canonize if self.low_s else sigencode_string
        return self._signing_key(private_key).sign_digest_deterministic(
            self._digest(message),
            hashfunc=self.hashfunc,
            sigencode=sigencode,
            allow_truncate=True,
        )

    def _verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        if self.low_s:
            _, s = sigdecode_string(signature, self.curve.order)
            if s > self.curve.order // 2:
                return False
        try:
            vk = VerifyingKey.from_string(public_key, curve=self.curve, hashfunc=self.hashfunc)
        except MalformedPointError:
            return False
        try:
            return vk.verify_digest(
                signature,
                self._digest(message),
                sigdecode=sigdecode_string,
                allow_truncate=True,
            )
        except BadSignatureError:
            return False
