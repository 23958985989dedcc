"""Exceptions raised by the sharing client."""


class SharingError(Exception):
    """Base exception for aggshare"""


class ParameterError(SharingError, ValueError):
    """Raised when public parameters are missing or malformed"""


class NoInverseExists(SharingError, ArithmeticError):
    """Raised when an operand has no inverse under the requested modulus"""

    def __init__(self, value: int, modulus: int):
        super().__init__(f"{value} has no inverse modulo {modulus}.")
        self.value = value
        self.modulus = modulus


class MissingAssignment(SharingError):
    """Raised when a proof is requested before the servers assigned its context"""

    def __init__(self, fields):
        super().__init__(
            "Assignment fields must be set before computing a proof: "
            + ", ".join(fields)
        )
        self.fields = tuple(fields)
