"""Uniform signing, verification and key-exchange contracts.

``unisig.classic``, ``unisig.pq`` and ``unisig.kex`` are resolved lazily: the
first access imports the adapter packages and returns the registry namespace
for that group.
"""
from typing import Any

from . import utils
from .base import BaseAdapter, KemAdapter, KeyExchangeAdapter, SigningAdapter
from .entropy import SYSTEM_RANDOM, DeterministicRandom, RandomSource, SystemRandom, random_scalar
from .errors import FormatError, LengthMismatch, PrimitiveFailure, TypeMismatch, UnisigError
from .interfaces import Encapsulation, KeyEncapsulation, KeyExchange, KeyGeneration, KeyPair, Signing
from .loader import load_adapters
from .registry import Namespace, VariantFamily, registry

_GROUPS = ("classic", "pq", "kex")

__version__ = "1.1.0"

__all__ = [
    "BaseAdapter",
    "DeterministicRandom",
    "Encapsulation",
    "FormatError",
    "KemAdapter",
    "KeyEncapsulation",
    "KeyExchange",
    "KeyExchangeAdapter",
    "KeyGeneration",
    "KeyPair",
    "LengthMismatch",
    "Namespace",
    "PrimitiveFailure",
    "RandomSource",
    "SYSTEM_RANDOM",
    "Signing",
    "SigningAdapter",
    "SystemRandom",
    "TypeMismatch",
    "UnisigError",
    "VariantFamily",
    "load_adapters",
    "random_scalar",
    "registry",
    "utils",
    *_GROUPS,
]


def __getattr__(name: str) -> Any:
    if name in _GROUPS:
        load_adapters()
        return registry.namespace(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
