"""
This module defines the public parameters a sharing client consumes: the
servers it shares to, the per-substation field, the security threshold, and
the per-aggregation (fid) public data of the linear construction.

PublicParameters is the provider contract. StaticPublicParameters is a
read-only, in-memory provider built from a mapping or a JSON document, for
deployments where the parameters are distributed as configuration.
"""

from __future__ import annotations
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urljoin

import structlog

from .constants import Construction
from .errors import ParameterError
from .field import check_modulus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Server:
    """A server addressed by its base URI."""

    uri: str

    def destination(self, construction: Construction) -> str:
        """Resolve the construction's endpoint against the base URI."""
        return urljoin(self.uri, construction.endpoint)


@dataclass(frozen=True)
class LinearPublicData:
    """Public data of the linear construction for one aggregation round."""

    n: int
    fid_prime: int
    n_roof: int
    g1: int
    g2: int
    h: Dict[int, int] = field(default_factory=dict)
    sk: Tuple[int, ...] = ()

    def totient(self) -> int:
        """
        Euler's totient of n_roof, computed from its factor pair.

        Raises:
        ParameterError: If the factor pair does not hold two factors.
        """
        if len(self.sk) != 2:
            raise ParameterError("Factor pair must contain exactly two factors.")
        p, q = self.sk
        return (p - 1) * (q - 1)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LinearPublicData:
        try:
            return cls(
                n=int(data["n"]),
                fid_prime=int(data["fid_prime"]),
                n_roof=int(data["n_roof"]),
                g1=int(data["g1"]),
                g2=int(data["g2"]),
                h={int(k): int(v) for k, v in data.get("h", {}).items()},
                sk=tuple(int(v) for v in data.get("sk", ())),
            )
        except KeyError as e:
            raise ParameterError(f"Linear public data is missing {e}.") from e


class PublicParameters(ABC):
    """
    Provider contract for public parameters.

    Implementations must be safe to read concurrently; the sharing client
    never mutates them.
    """

    @property
    @abstractmethod
    def substation_id(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def security_threshold(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def servers(self) -> List[Server]:
        raise NotImplementedError

    @abstractmethod
    def field_base(self, substation_id: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def generator(self, substation_id: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def linear_public_data(self, substation_id: int, fid: int) -> LinearPublicData:
        raise NotImplementedError


class StaticPublicParameters(PublicParameters):
    """Public parameters held in memory."""

    def __init__(
        self,
        substation_id: int,
        threshold: int,
        servers: List[Server],
        fields: Dict[int, Tuple[int, int]],
        linear: Optional[Dict[Tuple[int, int], LinearPublicData]] = None,
    ):
        """
        Initialize the provider and validate its shape.

        Parameters:
        substation_id (int): The substation this client reports for.
        threshold (int): The security threshold t.
        servers (List[Server]): The participating servers, in index order.
        fields (Dict[int, Tuple[int, int]]): (field_base, generator) per substation.
        linear (Dict[Tuple[int, int], LinearPublicData]): Linear public data
        per (substation_id, fid).

        Raises:
        ParameterError: If the threshold is not positive, there are fewer than
        threshold + 1 servers, any modulus is not positive, or the client's own
        substation has no field.
        """
        if not isinstance(threshold, int) or threshold <= 0:
            raise ParameterError(f"Security threshold must be positive, got {threshold}.")
        if not servers:
            raise ParameterError("Server list must not be empty.")
        if len(servers) <= threshold:
            raise ParameterError(
                f"{len(servers)} servers cannot reconstruct with threshold {threshold}."
            )
        for field_base, _ in fields.values():
            check_modulus(field_base)
        if substation_id not in fields:
            raise ParameterError(f"No field configured for substation {substation_id}.")

        self._substation_id = substation_id
        self._threshold = threshold
        self._servers = list(servers)
        self._fields = dict(fields)
        self._linear = dict(linear or {})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StaticPublicParameters:
        """
        Build the provider from a decoded parameter document.

        JSON object keys are strings, so substation ids and fids are converted
        to integers.

        Raises:
        ParameterError: If a required key is missing or a value is not numeric.
        """
        try:
            fields = {
                int(sid): (int(entry["field_base"]), int(entry["generator"]))
                for sid, entry in data["substations"].items()
            }
            linear = {
                (int(sid), int(fid)): LinearPublicData.from_mapping(entry)
                for sid, rounds in data.get("linear", {}).items()
                for fid, entry in rounds.items()
            }
            return cls(
                substation_id=int(data["substation_id"]),
                threshold=int(data["threshold"]),
                servers=[Server(uri) for uri in data["servers"]],
                fields=fields,
                linear=linear,
            )
        except ParameterError:
            raise
        except KeyError as e:
            raise ParameterError(f"Parameter document is missing {e}.") from e
        except (TypeError, ValueError) as e:
            raise ParameterError(f"Malformed parameter document: {e}") from e

    @classmethod
    def from_file(cls, path: str) -> StaticPublicParameters:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("loaded public parameters", path=path)
        return cls.from_mapping(data)

    @property
    def substation_id(self) -> int:
        return self._substation_id

    @property
    def security_threshold(self) -> int:
        return self._threshold

    @property
    def servers(self) -> List[Server]:
        return list(self._servers)

    def _field(self, substation_id: int) -> Tuple[int, int]:
        if substation_id not in self._fields:
            raise ParameterError(f"Unknown substation {substation_id}.")
        return self._fields[substation_id]

    def field_base(self, substation_id: int) -> int:
        return self._field(substation_id)[0]

    def generator(self, substation_id: int) -> int:
        return self._field(substation_id)[1]

    def linear_public_data(self, substation_id: int, fid: int) -> LinearPublicData:
        key = (substation_id, fid)
        if key not in self._linear:
            raise ParameterError(
                f"No linear public data for substation {substation_id}, fid {fid}."
            )
        return self._linear[key]
