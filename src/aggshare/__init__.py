"""
Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This package implements the client side of a threshold secret-sharing protocol
for aggregating substation measurements across independent servers.

Modules:
- field: Arbitrary-precision modular arithmetic.
- lagrange: Lagrange weights for pre-weighted shares, and subset reconstruction.
- polynomial: The ephemeral secret-sharing polynomial.
- parameters: Servers and the public parameter provider contract.
- sharer: Splitting a secret into pre-weighted shares for every server.
- homomorphic_hash: Sharing with a discrete-log commitment to the secret.
- linear_signature: Sharing with an RSA-style linear authenticator proof.
- data: The payload objects handed to the transport layer.

No single server, nor any group of at most t servers, learns a client's
secret; t + 1 servers reconstruct aggregates by summing shares.
"""

from .constants import Construction
from .errors import SharingError, ParameterError, NoInverseExists, MissingAssignment
from .field import mod_add, mod_mul, mod_pow, mod_inverse
from .lagrange import lagrange_weight, exact_lagrange_weight, reconstruct
from .polynomial import Polynomial
from .parameters import Server, LinearPublicData, PublicParameters, StaticPublicParameters
from .data import HomomorphicHashData, LinearSignatureData, ServerData
from .sharer import SecretSharer
from .homomorphic_hash import HomomorphicHash
from .linear_signature import LinearSignature
