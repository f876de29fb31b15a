from __future__ import annotations

from frozendict import frozendict

from rationax.core.constants import MAX_CYCLE_LEN, MAX_CYCLE_START
from rationax.core.log import get_logger

logger = get_logger(__name__)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| (Euclid). gcd(0, x) == x."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def trunc_mod(a: int, b: int) -> int:
    """Remainder of the truncating division a / b. The result carries the sign of a."""
    rem = abs(a) % abs(b)
    return -rem if a < 0 else rem


def modpow(base: int, exp: int, mod: int) -> int:
    """Computes base**exp % mod by square-and-multiply. modpow(b, 0, m) is 1."""
    result = 1
    while exp > 0:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


def factorize(n: int) -> frozendict[int, int]:
    """
    Prime factorization by trial division, first by 2 and then by odd numbers.

    Args:
        n (int): Number to factorize. Values smaller than 2 have no prime factors.

    Returns:
        frozendict[int, int]: Mapping from prime factor to its exponent.
    """
    factors: dict[int, int] = {}
    if n < 2:
        return frozendict(factors)
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1 if divisor == 2 else 2
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return frozendict(factors)


def cycle_len(num: int, denom: int) -> int:
    """
    Length of the repeating block in the decimal expansion of num / denom.

    Factors 2 and 5 of the denominator only shift the start of the cycle, so they are removed first.
    The remaining denominator determines the period as the multiplicative order of 10 modulo it.
    The numerator does not influence the period of a reduced fraction.

    Args:
        num (int): Numerator of a reduced fraction.
        denom (int): Positive denominator of a reduced fraction.

    Returns:
        int: The period, or 0 for terminating decimals and for periods longer than MAX_CYCLE_LEN.
    """
    del num
    for p in (2, 5):
        while denom % p == 0:
            denom //= p
    if denom == 1:
        return 0

    rem = 10 % denom
    length = 1
    while rem != 1:
        rem = rem * 10 % denom
        if length > MAX_CYCLE_LEN:
            logger.debug("Decimal period of 1/%d exceeds %d digits, not rendered as cycle", denom, MAX_CYCLE_LEN)
            return 0
        length += 1
    return length


def cycle_start(num: int, denom: int, length: int) -> int:
    """
    Offset of the first digit of the repeating block of num / denom.

    This is the smallest t with 10^t == 10^(t + length) (mod denom).

    Args:
        num (int): Numerator of a reduced fraction.
        denom (int): Positive denominator of a reduced fraction.
        length (int): Period as returned by cycle_len().

    Returns:
        int: Number of non-repeating digits after the decimal point, 0 if none is found
        within MAX_CYCLE_START steps.
    """
    del num
    rem1 = 1
    rem2 = modpow(10, length, denom)
    for t in range(MAX_CYCLE_START):
        if rem1 == rem2:
            return t
        rem1 = rem1 * 10 % denom
        rem2 = rem2 * 10 % denom
    return 0
