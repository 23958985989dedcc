"""
This module defines the SecretSharer class, which splits a secret into
pre-weighted shares, one per server.

A fresh polynomial of degree t (the security threshold) is generated for every
secret. It is evaluated at the points 1..n, one per server in order, and each
evaluation is multiplied by its Lagrange weight over {1..n}, so the servers can
recover an aggregate by summing instead of interpolating.
"""

import secrets
from random import Random
from typing import Dict, List, Optional, Tuple

import structlog

from .constants import Construction
from .errors import ParameterError
from .field import check_modulus
from .lagrange import lagrange_weight
from .parameters import PublicParameters, Server
from .polynomial import Polynomial

logger = structlog.get_logger(__name__)


class SecretSharer:
    """Class splitting secrets into weighted shares for the configured servers."""

    def __init__(self, public_parameters: PublicParameters, rng: Optional[Random] = None):
        """
        Initialize the sharer.

        Parameters:
        public_parameters (PublicParameters): Source of the field, threshold and servers.
        rng (Optional[Random]): Random source; defaults to the operating
        system's CSPRNG. Tests inject a seeded Random.
        """
        self.public_parameters = public_parameters
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def check_parameters(self, field_base: int) -> List[Server]:
        """
        Validate the parameters a sharing is about to use.

        Runs on every sharing, whichever provider supplied the parameters.

        Returns:
        List[Server]: The servers to share to.

        Raises:
        ParameterError: If the modulus or the threshold is not positive, or
        there are not more servers than the threshold.
        """
        check_modulus(field_base)
        threshold = self.public_parameters.security_threshold
        if not isinstance(threshold, int) or threshold <= 0:
            raise ParameterError(
                f"Security threshold must be positive, got {threshold}."
            )
        servers = list(self.public_parameters.servers)
        if not servers:
            raise ParameterError("Server list must not be empty.")
        if len(servers) <= threshold:
            raise ParameterError(
                f"{len(servers)} servers cannot reconstruct with threshold {threshold}."
            )
        return servers

    def generate_polynomial(self, secret: int, field_base: int) -> Polynomial:
        """Generate a fresh polynomial of degree t with the secret as constant term."""
        threshold = self.public_parameters.security_threshold
        polynomial = Polynomial.random(secret, threshold, field_base, self.rng)
        logger.debug(
            "generated polynomial",
            degree=polynomial.degree,
            field_bits=field_base.bit_length(),
        )
        return polynomial

    def random_nonce(self, field_base: int) -> int:
        check_modulus(field_base)
        # nonce <- $ [0, p - 1]
        return self.rng.randrange(field_base)

    @staticmethod
    def evaluation_points(count: int) -> Tuple[int, ...]:
        return tuple(range(1, count + 1))

    def generate_shares(
        self, secret: int, field_base: int, construction: Construction
    ) -> Dict[str, int]:
        """
        Share a secret among the servers.

        Parameters:
        secret (int): The value to share.
        field_base (int): The field modulus p the coefficients are drawn from.
        construction (Construction): The construction whose endpoint each share
        is addressed to.

        Returns:
        Dict[str, int]: Weighted share per server destination, in server order.

        Raises:
        ValueError: If the secret is not an integer.
        ParameterError: If the parameters fail check_parameters.
        """
        if not isinstance(secret, int):
            raise ValueError("Secret must be an integer.")

        servers = self.check_parameters(field_base)
        polynomial = self.generate_polynomial(secret, field_base)
        points = self.evaluation_points(len(servers))

        # (x, f(x) * beta_x), x in 1..n
        shares = {}
        for server, x in zip(servers, points):
            weighted_share = polynomial.evaluate(x) * lagrange_weight(x, points)
            shares[server.destination(construction)] = weighted_share

        logger.info(
            "shared secret",
            construction=construction.name,
            servers=len(servers),
            threshold=polynomial.degree,
        )
        return shares
