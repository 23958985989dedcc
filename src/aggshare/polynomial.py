"""
This module defines the Polynomial class, the ephemeral secret-sharing
polynomial whose constant term is the secret.

The non-constant coefficients are drawn uniformly from [1, p - 1]. Evaluation
is over the integers, without reduction modulo p, so that pre-weighted shares
sum to the secret itself rather than to its residue.
"""

from __future__ import annotations
from random import Random
from typing import Tuple
from .field import check_modulus


class Polynomial:
    """Class representing a secret-sharing polynomial."""

    def __init__(self, secret: int, coefficients: Tuple[int, ...]):
        """
        Initialize a polynomial from its secret and non-constant coefficients.

        Parameters:
        secret (int): The constant term a_0.
        coefficients (Tuple[int, ...]): The coefficients a_1, ..., a_t.

        Raises:
        ValueError: If the secret or any coefficient is not an integer.
        """
        if not all(isinstance(c, int) for c in (secret,) + tuple(coefficients)):
            raise ValueError("Secret and coefficients must be integers.")

        self.secret = secret
        self.coefficients = tuple(coefficients)

    @classmethod
    def random(cls, secret: int, degree: int, modulus: int, rng: Random) -> Polynomial:
        """
        Generate a polynomial with uniformly random non-constant coefficients.

        Parameters:
        secret (int): The constant term.
        degree (int): The number of random coefficients t.
        modulus (int): The field modulus p; coefficients lie in [1, p - 1].
        rng (Random): The random source to draw from.

        Returns:
        Polynomial: A fresh polynomial of the given degree.

        Raises:
        ParameterError: If the modulus is not positive.
        ValueError: If the degree is negative or the field has no non-zero element.
        """
        check_modulus(modulus)
        if degree < 0:
            raise ValueError("Polynomial degree must not be negative.")
        if degree and modulus < 2:
            raise ValueError("Field must contain a non-zero element.")

        # (a_1, ..., a_t) <- $ [1, p - 1]
        coefficients = tuple(rng.randrange(1, modulus) for _ in range(degree))
        return cls(secret, coefficients)

    @property
    def degree(self) -> int:
        return len(self.coefficients)

    def evaluate(self, x: int) -> int:
        """
        Evaluate the polynomial at x using Horner's method.

        Parameters:
        x (int): The point at which the polynomial is evaluated.

        Returns:
        int: secret + sum(a_i * x^i), over the integers.

        Raises:
        ValueError: If x is not an integer.
        """
        if not isinstance(x, int):
            raise ValueError("The value of x must be an integer.")

        y = 0
        for coefficient in reversed(self.coefficients):
            y = (y + coefficient) * x
        return y + self.secret

    def __repr__(self) -> str:
        return f"Polynomial(degree={self.degree})"
