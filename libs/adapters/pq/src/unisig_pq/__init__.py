"""Post-quantum signature adapters (ML-DSA and SPHINCS+).

Importing the package registers the ``pq`` group and its policy aliases.
Alias targets can be overridden with ``UNISIG_PQ_<ALIAS>``.
"""
from unisig.registry import registry

from .dilithium import Dilithium65, Dilithium87
from .sphincs import Sphincs192Fast, Sphincs192Small, Sphincs256Fast, Sphincs256Small

registry.alias("pq", "recommended", "sphincs256.fast")
registry.alias("pq", "fast", "dilithium87")
registry.alias("pq", "conservative", "sphincs256.small")

__all__ = [
    "Dilithium65",
    "Dilithium87",
    "Sphincs192Fast",
    "Sphincs192Small",
    "Sphincs256Fast",
    "Sphincs256Small",
]
