from __future__ import annotations

from typing import Sequence

from rationax.core.log import get_logger

logger = get_logger(__name__)


def continued_terms(num: int, denom: int) -> list[int]:
    """
    Continued fraction expansion of num / denom via the Euclidean algorithm.

    Args:
        num (int): Non-negative numerator.
        denom (int): Positive denominator.

    Returns:
        list[int]: Terms [a0, a1, ...] with num / denom = a0 + 1 / (a1 + 1 / (...)).
    """
    terms: list[int] = []
    while denom:
        terms.append(num // denom)
        num, denom = denom, num % denom
    return terms


def from_continued(terms: Sequence[int]) -> tuple[int, int]:
    """
    Obtains the fraction n/m from the terms of a finite continued fraction.

    Args:
        terms (Sequence[int]): Non-empty list of continued fraction terms.

    Returns:
        tuple[int, int]: Numerator and denominator of the convergent, in lowest terms.
    """
    if not terms:
        raise ValueError("Cannot build a convergent from an empty term sequence")
    # Gaussian bracket recurrence h_i = a_i * h_{i-1} + h_{i-2}
    h_prev, h = 0, 1
    k_prev, k = 1, 0
    for a in terms:
        h_prev, h = h, a * h + h_prev
        k_prev, k = k, a * k + k_prev
    return h, k


def simplest_convergent(num: int, denom: int, eps: float) -> tuple[int, int] | None:
    """
    Finds the convergent with the fewest terms whose distance to num / denom is below eps.

    Only proper prefixes of the expansion are tried, the full expansion is the value itself.

    Args:
        num (int): Non-negative numerator.
        denom (int): Positive denominator.
        eps (float): Absolute tolerance.

    Returns:
        tuple[int, int] | None: The convergent, or None if no shorter convergent is close enough.
    """
    terms = continued_terms(num, denom)
    for i in range(1, len(terms)):
        h, k = from_continued(terms[:i])
        if abs(h * denom - num * k) / (k * denom) < eps:
            return h, k
    logger.debug("No convergent of %d/%d lies within %g", num, denom, eps)
    return None
