"""
This module computes the Lagrange weights that let the servers reconstruct a
secret by summing pre-weighted shares instead of interpolating.

For a point i in the evaluation set S, the weight for interpolation at x = 0 is

    beta_i = prod_{j in S, j != i} j / prod_{j in S, j != i} (j - i)

computed over the integers. The division truncates toward zero and does not
check the remainder. For S = {1, ..., n} it is always exact, since
beta_i = (-1)^(i - 1) * C(n, i); callers using other point sets get the
truncated quotient.
"""

from fractions import Fraction
from typing import Iterable, Mapping, Tuple


def _check_points(current: int, points: Tuple[int, ...]) -> None:
    if len(points) != len(set(points)):
        raise ValueError("Evaluation points must be unique.")
    if current not in points:
        raise ValueError(f"Point {current} is not in the evaluation set.")


def _weight_terms(current: int, points: Tuple[int, ...]) -> Tuple[int, int]:
    numerator = 1
    denominator = 1
    for point in points:
        if point == current:
            continue
        numerator *= point
        denominator *= point - current
    return numerator, denominator


def lagrange_weight(current: int, points: Iterable[int]) -> int:
    """
    Calculate the integer Lagrange weight of a point relative to a point set.

    Parameters:
    current (int): The evaluation point whose weight is computed.
    points (Iterable[int]): Every evaluation point in use, current included.

    Returns:
    int: The numerator divided by the denominator, truncated toward zero.

    Raises:
    ValueError: If points contains duplicates or does not contain current.
    """
    points = tuple(points)
    _check_points(current, points)

    numerator, denominator = _weight_terms(current, points)
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient


def exact_lagrange_weight(current: int, points: Iterable[int]) -> Fraction:
    """Rational Lagrange weight, for point sets where the integer one is inexact."""
    points = tuple(points)
    _check_points(current, points)

    numerator, denominator = _weight_terms(current, points)
    return Fraction(numerator, denominator)


def reconstruct(
    weighted_shares: Mapping[int, int],
    points: Iterable[int],
    subset: Iterable[int],
) -> int:
    """
    Reconstruct a secret from a subset of pre-weighted shares.

    Each share was multiplied by its weight over the full point set when it was
    issued. The full-set weight is divided back out and the share is
    re-weighted with the exact weight restricted to the subset.

    Parameters:
    weighted_shares (Mapping[int, int]): Pre-weighted share per evaluation point.
    points (Iterable[int]): The full evaluation set the shares were issued for.
    subset (Iterable[int]): The points taking part in the reconstruction; must
    hold at least threshold + 1 points to recover the secret.

    Returns:
    int: The reconstructed secret.

    Raises:
    ValueError: If a subset point has no share or the result is not an integer.
    """
    points = tuple(points)
    subset = tuple(subset)
    if not subset:
        raise ValueError("Cannot reconstruct from an empty subset.")

    total = Fraction(0)
    for point in subset:
        if point not in weighted_shares:
            raise ValueError(f"No share for point {point}.")
        evaluation = Fraction(weighted_shares[point], lagrange_weight(point, points))
        total += evaluation * exact_lagrange_weight(point, subset)

    if total.denominator != 1:
        raise ValueError("Shares do not reconstruct to an integer.")
    return total.numerator
