# ruff: noqa: F811
import decimal
import fractions
import math
import re
from collections.abc import Mapping, Sequence
from typing import Callable, NamedTuple

import numpy as np
from plum import dispatch, overload

from rationax.core import utils
from rationax.core.constants import FAREY_BOUND
from rationax.core.exceptions import DivisionByZero, InvalidParameter, NonIntegerParameter
from rationax.core.fraction import Fraction
from rationax.core.log import get_logger
from rationax.core.typing import ArrayLike, FloatLike, IntegerLike, NumberLike

logger = get_logger(__name__)

_TOKEN = re.compile(r"[0-9]+|.", re.DOTALL)
_DIGITS = re.compile(r"[0-9]+")


class ParsedFraction(NamedTuple):
    """Result of parsing an input: ``sign * num / denom``, not yet reduced."""

    sign: int
    num: int | float
    denom: int | float

    @property
    def is_nan(self) -> bool:
        return utils.is_nan(self.num) or utils.is_nan(self.denom)


NAN_PARSED = ParsedFraction(1, math.nan, math.nan)

ZERO_PARSED = ParsedFraction(1, 0, 1)


def _signed(num: int, denom: int) -> ParsedFraction:
    return ParsedFraction(-1 if num * denom < 0 else 1, abs(num), abs(denom))


def _as_integer(x) -> int:
    if isinstance(x, IntegerLike):
        return int(x)
    if isinstance(x, FloatLike) and math.isfinite(x) and float(x).is_integer():
        return int(x)
    raise NonIntegerParameter()


def _record(num, denom=1, sign=1) -> ParsedFraction:
    return _signed(_as_integer(num) * _as_integer(sign), _as_integer(denom))


def _run_length(moves: Callable[[int], bool], limit: int) -> int:
    """Largest k <= limit such that moves(j) holds for all j <= k. moves(1) must hold."""
    # float division is monotone along a run, so moves() holds for a prefix of 1..limit
    lo, hi = 1, limit
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if moves(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def farey_approximation(value: float, bound: int = FAREY_BOUND) -> tuple[int, int]:
    """
    Best rational approximation of a float in [0, 1) by a mediant search in the Farey sequence.

    The brackets a/b and c/d start at 0/1 and 1/1. In every step the bracket on the wrong side of
    value is replaced by the mediant (a + c) / (b + d), until the mediant reproduces value exactly
    or a bracket denominator grows past bound. Consecutive moves towards the same side are taken as
    one batch, so values close to 0 or 1 do not need one step per denominator.

    Args:
        value (float): Number in [0, 1).
        bound (int, optional): Largest denominator explored. Defaults to FAREY_BOUND.

    Returns:
        tuple[int, int]: Numerator and denominator of the approximation.
    """
    a, b = 0, 1
    c, d = 1, 1
    num, denom = 0, 1
    while b <= bound and d <= bound:
        mediant = (a + c) / (b + d)
        if value == mediant:
            if b + d <= bound:
                return a + c, b + d
            if d > b:
                return c, d
            return a, b
        if value > mediant:
            k = _run_length(lambda j: (a + j * c) / (b + j * d) < value, (bound - b) // d + 1)
            a, b = a + k * c, b + k * d
        else:
            k = _run_length(lambda j: (c + j * a) / (d + j * b) > value, (bound - d) // b + 1)
            c, d = c + k * a, d + k * b
        num, denom = (c, d) if b > bound else (a, b)
    logger.debug("Farey search for %r stopped at denominator bound %d", value, bound)
    return num, denom


def _parse_float(value: float) -> ParsedFraction:
    if not math.isfinite(value):
        return NAN_PARSED
    sign = -1 if value < 0 else 1
    value = abs(value)
    if value.is_integer():
        return ParsedFraction(sign, int(value), 1)

    scale = 1
    if value >= 1:
        scale = 10 ** math.floor(1 + math.log10(value))
        value /= scale
    num, denom = farey_approximation(value)
    return ParsedFraction(sign, num * scale, denom)


def _encloses(open_token: str | None, close_token: str | None) -> bool:
    return (open_token == "(" and close_token == ")") or (open_token == "'" and close_token == "'")


def _parse_string(value: str) -> ParsedFraction:
    tokens = _TOKEN.findall(value.strip())
    if not any(_DIGITS.fullmatch(t) for t in tokens):
        raise InvalidParameter(f"No digits in {value!r}")

    def at(i: int) -> str | None:
        return tokens[i] if i < len(tokens) else None

    def digits(token: str | None, sign: int) -> int:
        if token is None or not _DIGITS.fullmatch(token):
            raise InvalidParameter(f"Expected digits in {value!r}, got {token!r}")
        return int(token) * sign

    i, sign = 0, 1
    if at(i) == "-":
        sign = -1
        i += 1
    elif at(i) == "+":
        i += 1

    # value = whole + part / part_scale + repeat / (part_scale * repeat_scale)
    whole, part, repeat = 0, 0, 0
    part_scale, repeat_scale = 1, 1

    if len(tokens) == i + 1:
        part = digits(at(i), sign)
        i += 1
    elif at(i + 1) == "." or at(i) == ".":
        if at(i) != ".":
            whole = digits(at(i), sign)
            i += 1
        i += 1
        # non-repeating decimals, followed by the end or a repeating block
        if i + 1 == len(tokens) or _encloses(at(i + 1), at(i + 3)):
            part = digits(at(i), sign)
            part_scale = 10 ** len(at(i))
            i += 1
        if _encloses(at(i), at(i + 2)):
            repeat = digits(at(i + 1), sign)
            repeat_scale = 10 ** len(at(i + 1)) - 1
            i += 3
    elif at(i + 1) in ("/", ":"):
        part = digits(at(i), sign)
        part_scale = digits(at(i + 2), 1)
        i += 3
    elif at(i + 1) == " " and at(i + 3) == "/":
        whole = digits(at(i), sign)
        part = digits(at(i + 2), sign)
        part_scale = digits(at(i + 4), 1)
        i += 5

    if i < len(tokens):
        raise InvalidParameter(f"Unexpected {''.join(tokens[i:])!r} in {value!r}")

    denom = part_scale * repeat_scale
    num = repeat + denom * whole + repeat_scale * part
    return ParsedFraction(-1 if num < 0 else 1, abs(num), denom)


## parse_value #####################################
@overload
def parse_value(value: None) -> ParsedFraction:
    return ZERO_PARSED


@overload
def parse_value(value: Fraction) -> ParsedFraction:
    return ParsedFraction(value.sign, value.num, value.denom)


@overload
def parse_value(value: IntegerLike) -> ParsedFraction:
    value = int(value)
    return ParsedFraction(-1 if value < 0 else 1, abs(value), 1)


@overload
def parse_value(value: FloatLike) -> ParsedFraction:
    return _parse_float(float(value))


@overload
def parse_value(value: str) -> ParsedFraction:
    return _parse_string(value)


@overload
def parse_value(value: Mapping) -> ParsedFraction:
    if "n" in value and "d" in value:
        return _record(value["n"], value["d"], value.get("s", 1))
    if 0 in value:
        return _record(value[0], value.get(1, 1))
    raise InvalidParameter(f"Record needs keys 'n' and 'd' or 0, got {list(value)}")


@overload
def parse_value(value: Sequence) -> ParsedFraction:
    if not value:
        raise InvalidParameter("Empty sequence")
    return _record(*value[:2])


@overload
def parse_value(value: fractions.Fraction) -> ParsedFraction:
    return _signed(value.numerator, value.denominator)


@overload
def parse_value(value: decimal.Decimal) -> ParsedFraction:
    if not value.is_finite():
        return NAN_PARSED
    return _signed(*value.as_integer_ratio())


@overload
def parse_value(value: ArrayLike) -> ParsedFraction:
    if utils.is_traced(value):
        raise InvalidParameter("Cannot build an exact fraction from a traced value")
    if np.size(value) != 1:
        raise InvalidParameter(f"Expected a single element, got shape {np.shape(value)}")
    return parse_value(value.item())


@overload
def parse_value(value: object) -> ParsedFraction:
    raise InvalidParameter(f"Cannot parse {type(value).__name__}")


@dispatch
def parse_value(value):  # type: ignore
    """Parses a single input of any supported shape into an unreduced ParsedFraction."""
    del value
    raise NotImplementedError()


## parse_pair #####################################
@overload
def parse_pair(num: NumberLike, denom: NumberLike) -> ParsedFraction:
    return _signed(_as_integer(num), _as_integer(denom))


@overload
def parse_pair(num: object, denom: object) -> ParsedFraction:
    raise InvalidParameter(f"Cannot parse pair of {type(num).__name__} and {type(denom).__name__}")


@dispatch
def parse_pair(num, denom):  # type: ignore
    """Parses an explicit numerator and denominator. Both must be integer-valued."""
    del num, denom
    raise NotImplementedError()


def parse(a=None, b=None) -> ParsedFraction:
    """
    Converts one or two inputs into a (sign, num, denom) triple.

    Args:
        a (optional): Any supported input, or the numerator if b is given. Defaults to None (zero).
        b (optional): Denominator. Defaults to None.

    Raises:
        DivisionByZero: if the denominator is zero.
        InvalidParameter: if the input has an unsupported type or grammar.
        NonIntegerParameter: if an explicit numerator or denominator is not integer-valued.

    Returns:
        ParsedFraction: The parsed, unreduced triple. NaN and infinite floats give NAN_PARSED.
    """
    p = parse_value(a) if b is None else parse_pair(a, b)
    if p.denom == 0:
        raise DivisionByZero()
    return p
