"""Behaviour every signing adapter shares, checked against each of them."""
from __future__ import annotations

from typing import Any, NamedTuple

import pytest

from unisig import DeterministicRandom, KeyPair, Signing, registry
from unisig.errors import LengthMismatch, TypeMismatch

SIGNERS = [
    ("classic", "secp256k1"),
    ("classic", "ed25519"),
    ("classic", "p256"),
    ("classic", "p384"),
    ("classic", "p521"),
    ("pq", "dilithium65"),
    ("pq", "dilithium87"),
    ("pq", "sphincs192.fast"),
    ("pq", "sphincs192.small"),
    ("pq", "sphincs256.fast"),
    ("pq", "sphincs256.small"),
]


class Signed(NamedTuple):
    algo: Any
    pair: KeyPair
    message: Any
    signature: bytes


def _message_for(algo: Any) -> Any:
    if algo.digest_size:
        return bytes(range(algo.digest_size))
    return "contract message"


def _flip(data: bytes, index: int = 0) -> bytes:
    out = bytearray(data)
    out[index] ^= 0x01
    return bytes(out)


@pytest.fixture(scope="module", params=SIGNERS, ids=[f"{g}.{n}" for g, n in SIGNERS])
def signed(request) -> Signed:
    group, name = request.param
    algo = registry.get(group, name)
    pair = algo.generate_key_pair(bytes(range(algo.seed_size)))
    message = _message_for(algo)
    return Signed(algo, pair, message, algo.sign(message, pair.private_key))


def test_implements_contract(signed: Signed) -> None:
    assert isinstance(signed.algo, Signing)
    assert signed.algo.name


def test_sizes(signed: Signed) -> None:
    algo = signed.algo
    assert len(signed.pair.private_key) == algo.private_key_size
    assert len(signed.pair.public_key) == algo.public_key_size
    assert len(signed.signature) == algo.signature_size
    assert isinstance(signed.signature, bytes)


def test_round_trip(signed: Signed) -> None:
    assert signed.algo.verify(signed.signature, signed.message, signed.pair.public_key) is True


def test_key_pair_is_a_function_of_the_seed(signed: Signed) -> None:
    algo = signed.algo
    seed = bytes(range(algo.seed_size))
    assert algo.generate_key_pair(seed) == signed.pair
    assert algo.generate_private_key(seed) == signed.pair.private_key
    assert algo.get_public_key(signed.pair.private_key) == signed.pair.public_key


def test_accepts_mutable_buffers(signed: Signed) -> None:
    algo = signed.algo
    assert algo.get_public_key(bytearray(signed.pair.private_key)) == signed.pair.public_key
    assert algo.verify(bytearray(signed.signature), signed.message, memoryview(signed.pair.public_key))


def test_flipped_signature_is_rejected(signed: Signed) -> None:
    for index in (0, len(signed.signature) // 2):
        assert signed.algo.verify(_flip(signed.signature, index), signed.message, signed.pair.public_key) is False


def test_other_message_is_rejected(signed: Signed) -> None:
    if signed.algo.digest_size:
        other = _flip(signed.message)
    else:
        other = "another message"
    assert signed.algo.verify(signed.signature, other, signed.pair.public_key) is False


def test_flipped_public_key_is_rejected(signed: Signed) -> None:
    public_key = signed.pair.public_key
    for index in (0, 1, len(public_key) - 1):
        assert signed.algo.verify(signed.signature, signed.message, _flip(public_key, index)) is False


def test_other_public_key_is_rejected(signed: Signed) -> None:
    algo = signed.algo
    other = algo.generate_key_pair(b"\x00" + b"\x07" * (algo.seed_size - 1))
    assert other.public_key != signed.pair.public_key
    assert algo.verify(signed.signature, signed.message, other.public_key) is False


def test_seed_type_checked_before_length(signed: Signed) -> None:
    algo = signed.algo
    with pytest.raises(TypeMismatch, match="must be bytes"):
        algo.generate_private_key("invalid")
    with pytest.raises(LengthMismatch):
        algo.generate_private_key(b"\x01" * (algo.seed_size - 1))


def test_sign_validation_order(signed: Signed) -> None:
    algo = signed.algo
    with pytest.raises(TypeMismatch):
        algo.sign(signed.message, "short")
    with pytest.raises(TypeMismatch):
        algo.sign([1, 2, 3], b"short")
    with pytest.raises(LengthMismatch):
        algo.sign(signed.message, signed.pair.private_key[:-1])


def test_verify_validation_order(signed: Signed) -> None:
    algo = signed.algo
    with pytest.raises(TypeMismatch):
        algo.verify(signed.signature.hex(), signed.message, b"short")
    with pytest.raises(TypeMismatch):
        algo.verify(b"short", signed.message, signed.pair.public_key.hex())
    with pytest.raises(LengthMismatch):
        algo.verify(signed.signature[:-1], signed.message, signed.pair.public_key)
    with pytest.raises(LengthMismatch):
        algo.verify(signed.signature, signed.message, signed.pair.public_key + b"\x00")


def test_get_public_key_validation(signed: Signed) -> None:
    algo = signed.algo
    with pytest.raises(TypeMismatch):
        algo.get_public_key(None)
    with pytest.raises(LengthMismatch):
        algo.get_public_key(b"")


def test_random_keys_come_from_the_injected_source(signed: Signed) -> None:
    cls = type(signed.algo)
    first = cls(rng=DeterministicRandom(b"audit")).generate_private_key()
    second = cls(rng=DeterministicRandom(b"audit")).generate_private_key()
    assert first == second
    assert len(first) == cls.private_key_size
    override = signed.algo.generate_private_key(rng=DeterministicRandom(b"audit"))
    assert override == first
    assert signed.algo.generate_private_key() != first
