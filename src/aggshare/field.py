"""
This module provides the arbitrary-precision modular arithmetic used across
the sharing client: addition, multiplication, exponentiation and inversion
modulo a positive integer.

All values are plain Python integers, so there is no fixed-width wraparound.
Inversion is computed with the extended Euclidean algorithm and fails with
NoInverseExists when the operand and the modulus are not coprime.
"""

from typing import Tuple
from .errors import NoInverseExists, ParameterError


def check_modulus(modulus: int) -> int:
    """
    Validate that a modulus is a positive integer.

    Parameters:
    modulus (int): The modulus to validate.

    Returns:
    int: The modulus, unchanged.

    Raises:
    ParameterError: If the modulus is not an integer or is not positive.
    """
    if not isinstance(modulus, int) or isinstance(modulus, bool):
        raise ParameterError("Modulus must be an integer.")
    if modulus <= 0:
        raise ParameterError(f"Modulus must be positive, got {modulus}.")
    return modulus


def mod_add(a: int, b: int, modulus: int) -> int:
    return (a + b) % check_modulus(modulus)


def mod_mul(a: int, b: int, modulus: int) -> int:
    return (a * b) % check_modulus(modulus)


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Run the extended Euclidean algorithm.

    Returns:
    Tuple[int, int, int]: (g, x, y) such that a * x + b * y == g == gcd(a, b).
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int) -> int:
    """
    Compute the multiplicative inverse of a modulo modulus.

    Parameters:
    a (int): The value to invert.
    modulus (int): A positive modulus.

    Returns:
    int: z in [0, modulus) with a * z == 1 (mod modulus).

    Raises:
    ParameterError: If the modulus is not positive.
    NoInverseExists: If gcd(a, modulus) != 1.
    """
    check_modulus(modulus)
    g, x, _ = egcd(a % modulus, modulus)
    if g != 1:
        raise NoInverseExists(a, modulus)
    return x % modulus


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus.

    A negative exponent raises the inverse of base to -exponent, so it
    requires base to be invertible.

    Raises:
    ParameterError: If the modulus is not positive.
    NoInverseExists: If the exponent is negative and base is not invertible.
    """
    check_modulus(modulus)
    if exponent < 0:
        base = mod_inverse(base, modulus)
        exponent = -exponent
    return pow(base, exponent, modulus)
