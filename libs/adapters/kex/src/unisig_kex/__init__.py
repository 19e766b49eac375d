"""Key agreement adapters: ECDH (X25519 and NIST curves) and ML-KEM.

Importing the package registers the ``kex`` group and its policy aliases.
Alias targets can be overridden with ``UNISIG_KEX_<ALIAS>``.
"""
from unisig.registry import registry

from .ecdh import X25519, EcdhP256, EcdhP384, EcdhP521
from .kyber import Kyber768, Kyber1024

registry.alias("kex", "recommended", "kyber1024")
registry.alias("kex", "fast", "kyber768")
registry.alias("kex", "classic", "ecdh")

__all__ = ["EcdhP256", "EcdhP384", "EcdhP521", "Kyber1024", "Kyber768", "X25519"]
