"""
This module defines the LinearSignature construction. The shares are issued as
in every construction; once the servers have assigned the sharing its
aggregation context, partial_proof attaches an RSA-style authenticator over the
same (secret, nonce) pair.

The proof value x satisfies

    x^eN = G1^s * H[clientID] * G2^(nonce + secret)  (mod NRoof)

with eN = N * fidPrime, so a server can check it by raising x to eN.
"""

import structlog

from .constants import Construction
from .data import LinearSignatureData, ServerData
from .errors import MissingAssignment, ParameterError
from .field import mod_inverse, mod_mul, mod_pow
from .sharer import SecretSharer

logger = structlog.get_logger(__name__)


class LinearSignature(SecretSharer):
    """Class sharing secrets under the linear authenticator construction."""

    def share_secret(self, secret: int) -> LinearSignatureData:
        """
        Share a secret under the linear construction.

        The returned object is pending: its substation, fid and client index
        must be assigned before partial_proof can run.

        Parameters:
        secret (int): The value to share.

        Returns:
        LinearSignatureData: Weighted shares per server and the nonce.
        """
        if not isinstance(secret, int):
            raise ValueError("Secret must be an integer.")

        substation_id = self.public_parameters.substation_id
        field_base = self.public_parameters.field_base(substation_id)
        self.check_parameters(field_base)
        nonce = self.random_nonce(field_base)

        shares = self.generate_shares(secret, field_base, Construction.LINEAR)
        return LinearSignatureData(
            {uri: ServerData(share) for uri, share in shares.items()}, nonce
        )

    def partial_proof(
        self, data: LinearSignatureData, secret: int
    ) -> LinearSignatureData:
        """
        Compute the verifier fields of a linear sharing.

        Parameters:
        data (LinearSignatureData): A sharing whose context has been assigned.
        secret (int): The secret that was shared into data.

        Returns:
        LinearSignatureData: data, updated in place with (fidPrime, s, x).

        Raises:
        MissingAssignment: If the substation, fid or client index is not set.
        ParameterError: If no public data exists for the round or the client.
        NoInverseExists: If eN is not invertible modulo the totient of NRoof.
        """
        missing = data.missing_assignment()
        if missing:
            raise MissingAssignment(missing)

        public_data = self.public_parameters.linear_public_data(
            data.substation_id, data.fid
        )
        if data.client_id not in public_data.h:
            raise ParameterError(f"No published value for client {data.client_id}.")
        n_roof = public_data.n_roof

        # eN = N * fidPrime
        e_n = public_data.n * public_data.fid_prime
        # s <- $ [0, eN)
        s = self.rng.randrange(e_n)
        # x_R = nonce + m
        x_r = data.nonce + secret
        # x^eN = G1^s * H[clientID] * G2^x_R mod NRoof
        x_e_n = mod_mul(
            mod_mul(
                mod_pow(public_data.g1, s, n_roof), public_data.h[data.client_id], n_roof
            ),
            mod_pow(public_data.g2, x_r, n_roof),
            n_roof,
        )
        # z = eN^-1 mod phi(NRoof), so (x^eN)^z = x mod NRoof
        e_n_inverse = mod_inverse(e_n, public_data.totient())
        x = mod_pow(x_e_n, e_n_inverse, n_roof)

        data.set_verifier_data(public_data.fid_prime, s, x)
        logger.info(
            "computed partial proof",
            substation_id=data.substation_id,
            fid=data.fid,
            client_id=data.client_id,
        )
        return data
