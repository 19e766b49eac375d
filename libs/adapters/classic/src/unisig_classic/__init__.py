"""Classic (pre-quantum) signature adapters.

Importing the package registers secp256k1, ed25519, p256, p384, p521 and
bls12_381 in the ``classic`` group, together with the ``ecdsa``, ``eddsa`` and
``bls`` aliases.
"""

from .bls12_381 import Bls12381
from .ed25519 import Ed25519
from .nist import P256, P384, P521
from .secp256k1 import Secp256k1

__all__ = ["Bls12381", "Ed25519", "P256", "P384", "P521", "Secp256k1"]
