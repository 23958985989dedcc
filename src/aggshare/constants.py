"""
These constants define the fixed parts of the sharing protocol: the two
commitment constructions a client can feed, and the relative endpoint each
construction's shares are posted to on a server.
"""

from enum import Enum


class Construction(Enum):
    """Commitment scheme a set of shares belongs to."""

    HASH = "api/hash-client-share"
    LINEAR = "api/linear-client-share"

    @property
    def endpoint(self) -> str:
        return self.value


# Log level used when the caller does not pick one
DEFAULT_LOG_LEVEL: str = "info"
