"""
This module defines the objects a sharing client hands to the transport layer.

HomomorphicHashData carries the weighted shares of the hash construction with
its commitment and nonce. LinearSignatureData carries the weighted shares of
the linear construction and is completed in two further phases: the servers
assign its context (substation, fid, client index), then partial_proof fills
in the verifier fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass
class HomomorphicHashData:
    """Shares, commitment and nonce of one hash-construction sharing."""

    shares: Dict[str, int]
    proof_component: int
    nonce: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shares": dict(self.shares),
            "proofComponent": self.proof_component,
            "nonce": self.nonce,
        }


@dataclass
class ServerData:
    """Share bound for one server in the linear construction."""

    share: int


@dataclass
class LinearSignatureData:
    """Shares, nonce, assigned context and verifier fields of one linear sharing."""

    shares: Dict[str, ServerData]
    nonce: int
    substation_id: Optional[int] = None
    fid: Optional[int] = None
    client_id: Optional[int] = None
    fid_prime: Optional[int] = None
    s: Optional[int] = None
    x: Optional[int] = None

    ASSIGNMENT_FIELDS = ("substation_id", "fid", "client_id")

    def assign(self, substation_id: int, fid: int, client_id: int) -> None:
        """Record the context the servers assigned to this sharing."""
        self.substation_id = substation_id
        self.fid = fid
        self.client_id = client_id

    def missing_assignment(self) -> Tuple[str, ...]:
        return tuple(
            name for name in self.ASSIGNMENT_FIELDS if getattr(self, name) is None
        )

    def set_verifier_data(self, fid_prime: int, s: int, x: int) -> None:
        self.fid_prime = fid_prime
        self.s = s
        self.x = x

    @property
    def has_proof(self) -> bool:
        return self.x is not None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "shares": {uri: data.share for uri, data in self.shares.items()},
            "nonce": self.nonce,
            "substationID": self.substation_id,
            "fid": self.fid,
            "clientID": self.client_id,
        }
        if self.has_proof:
            payload["verifier"] = {"fidPrime": self.fid_prime, "s": self.s, "x": self.x}
        return payload
