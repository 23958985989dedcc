"""
This module defines the HomomorphicHash construction. Alongside the weighted
shares it publishes a discrete-log commitment g^(secret + nonce) mod p, which
lets the servers check the aggregate they reconstruct without learning any
single secret.
"""

import structlog

from .constants import Construction
from .data import HomomorphicHashData
from .field import mod_pow
from .sharer import SecretSharer

logger = structlog.get_logger(__name__)


class HomomorphicHash(SecretSharer):
    """Class sharing secrets under the homomorphic hash construction."""

    def share_secret(self, secret: int) -> HomomorphicHashData:
        """
        Share a secret and commit to it.

        Parameters:
        secret (int): The value to share.

        Returns:
        HomomorphicHashData: Weighted shares per server, the commitment and the nonce.

        Raises:
        ValueError: If the secret is not an integer.
        ParameterError: If the substation's field is unknown or malformed, the
        threshold is not positive, or there are not more servers than the threshold.
        """
        if not isinstance(secret, int):
            raise ValueError("Secret must be an integer.")

        substation_id = self.public_parameters.substation_id
        field_base = self.public_parameters.field_base(substation_id)
        generator = self.public_parameters.generator(substation_id)
        self.check_parameters(field_base)

        nonce = self.random_nonce(field_base)
        # c = g^(m + nonce) mod p
        proof_component = self.hash(field_base, secret + nonce, generator)
        logger.debug("computed commitment", substation_id=substation_id)

        shares = self.generate_shares(secret, field_base, Construction.HASH)
        return HomomorphicHashData(shares, proof_component, nonce)

    @staticmethod
    def hash(field_base: int, value: int, generator: int) -> int:
        """Commit to a value as generator^value mod field_base."""
        return mod_pow(generator, value, field_base)
