from __future__ import annotations

from rationax.core.constants import DEFAULT_DECIMALS
from rationax.core.numtheory import cycle_len, cycle_start


def _whole_part(num: int, denom: int, exclude_whole: bool) -> tuple[int, int]:
    whole = num // denom if exclude_whole else 0
    return whole, (num % denom if whole > 0 else num)


def to_fraction(sign: int, num: int, denom: int, exclude_whole: bool = False) -> str:
    """Renders a canonical fraction as "n/d", "-n/d" or "w n/d" for mixed numbers."""
    res = "-" if sign < 0 else ""
    if denom == 1:
        return f"{res}{num}"
    whole, num = _whole_part(num, denom, exclude_whole)
    if whole > 0:
        res += f"{whole} "
    return f"{res}{num}/{denom}"


def to_latex(sign: int, num: int, denom: int, exclude_whole: bool = False) -> str:
    r"""Renders a canonical fraction as LaTeX, e.g. "-\frac{1}{2}" or "1\frac{1}{2}"."""
    res = "-" if sign < 0 else ""
    if denom == 1:
        return f"{res}{num}"
    whole, num = _whole_part(num, denom, exclude_whole)
    if whole > 0:
        res += str(whole)
    return res + "\\frac{" + str(num) + "}{" + str(denom) + "}"


def _long_division(rem: int, denom: int, count: int) -> tuple[str, int]:
    digits = []
    for _ in range(count):
        digits.append(str(rem // denom))
        rem = rem % denom * 10
    return "".join(digits), rem


def to_decimal(sign: int, num: int, denom: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Renders a canonical fraction as decimal string with the repeating block in parentheses.

    Examples: 1/2 -> "0.5", 1/3 -> "0.(3)", 1/6 -> "0.1(6)", -22/7 -> "-3.(142857)".

    Args:
        sign (int): -1 or 1.
        num (int): Non-negative numerator.
        denom (int): Positive denominator, coprime to num.
        decimals (int, optional): Maximum number of decimal places if no repeating block is detected.
            Defaults to DEFAULT_DECIMALS.

    Returns:
        str: The decimal representation.
    """
    res = "-" if sign < 0 else ""
    res += str(num // denom)
    rem = num % denom * 10

    length = cycle_len(num, denom)
    if length:
        offset = cycle_start(num, denom, length)
        prefix, rem = _long_division(rem, denom, offset)
        cycle, _ = _long_division(rem, denom, length)
        return f"{res}.{prefix}({cycle})"

    digits = []
    for _ in range(decimals):
        if not rem:
            break
        digits.append(str(rem // denom))
        rem = rem % denom * 10
    return f"{res}.{''.join(digits)}" if digits else res
