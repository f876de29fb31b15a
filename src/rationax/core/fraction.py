from __future__ import annotations

import decimal
import fractions
import math
import operator
from typing import TYPE_CHECKING, Any

import numpy as np

from rationax.core import continued, numtheory, rendering, utils
from rationax.core.constants import DEFAULT_DECIMALS, DEFAULT_SIMPLIFY_EPS, MAX_POW_BITS
from rationax.core.exceptions import DivisionByZero, ExponentOverflow, NonIntegerParameter
from rationax.core.log import get_logger
from rationax.core.null import NO_RESULT, NoResult
from rationax.core.pytrees import TreeClass, autoinit, frozen_field

if TYPE_CHECKING:
    from rationax.core.parsing import ParsedFraction

logger = get_logger(__name__)


def _operand(a: Any, b: Any) -> ParsedFraction:
    from rationax.core.parsing import parse

    return parse(a, b)


def _floor_div(a: int, b: int) -> int:
    return a // b


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _half_up_div(a: int, b: int) -> int:
    # floor(a / b + 1/2), halves are rounded towards +inf
    return (2 * a + b) // (2 * b)


def _scaled_power(value: int, exp_num: int, exp_denom: int) -> int | None:
    result = 1
    for prime, count in numtheory.factorize(value).items():
        scaled, rest = divmod(count * exp_num, exp_denom)
        if rest:
            return None
        result *= prime**scaled
    return result


@autoinit
class Fraction(TreeClass):
    """Exact rational number in canonical form.

    A value is stored as ``sign * num / denom`` with ``sign`` in {-1, 1}, ``num >= 0``,
    ``denom > 0`` and ``gcd(num, denom) == 1``. Constructing a Fraction from keyword arguments
    is the fast path used by all operations: the numerator and denominator may carry a sign and
    need not be reduced, ``__post_init__`` brings them into canonical form. Use
    :func:`fraction` to build a value from any supported input (strings, floats, pairs, ...).

    A Fraction whose numerator and denominator are NaN represents a floating point NaN or
    infinity that entered through parsing. It propagates through all arithmetic.

    Fractions are immutable pytrees without leaves, so they pass through jax transformations as
    static data.
    """

    sign: int = frozen_field(default=1)
    num: int | float = frozen_field(default=0)
    denom: int | float = frozen_field(default=1)

    def __post_init__(self):
        num, denom = self.num, self.denom
        if utils.is_nan(num) or utils.is_nan(denom):
            self.sign, self.num, self.denom = 1, math.nan, math.nan
            return
        try:
            num, denom = operator.index(num), operator.index(denom)
        except TypeError as e:
            raise NonIntegerParameter() from e
        if denom == 0:
            raise DivisionByZero()

        negative = (self.sign < 0) ^ (num < 0) ^ (denom < 0)
        common = numtheory.gcd(num, denom)
        self.sign = -1 if negative and num != 0 else 1
        self.num = abs(num) // common
        self.denom = abs(denom) // common

    @property
    def is_nan(self) -> bool:
        return utils.is_nan(self.num)

    def _nan_with(self, p: ParsedFraction) -> bool:
        return self.is_nan or p.is_nan

    # Arithmetic
    def add(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        return Fraction(
            num=self.sign * self.num * p.denom + p.sign * self.denom * p.num,
            denom=self.denom * p.denom,
        )

    def sub(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        return Fraction(
            num=self.sign * self.num * p.denom - p.sign * self.denom * p.num,
            denom=self.denom * p.denom,
        )

    def mul(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        return Fraction(
            num=self.sign * p.sign * self.num * p.num,
            denom=self.denom * p.denom,
        )

    def div(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        return Fraction(
            num=self.sign * p.sign * self.num * p.denom,
            denom=self.denom * p.num,
        )

    def mod(self, a: Any = None, b: Any = None) -> Fraction:
        """Truncated remainder. The result has the sign of this value.

        Without an argument the remainder of the integer division numerator / denominator is returned,
        e.g. fraction(7, 2).mod() == 1. With an argument x, the result is self - x * trunc(self / x).
        """
        if self.is_nan:
            return NAN
        if a is None and b is None:
            return Fraction(num=numtheory.trunc_mod(self.sign * self.num, self.denom), denom=1)
        p = _operand(a, b)
        if p.is_nan:
            return NAN
        if p.num == 0:
            raise DivisionByZero()
        return Fraction(
            num=numtheory.trunc_mod(self.sign * p.denom * self.num, p.num * self.denom),
            denom=p.denom * self.denom,
        )

    def gcd(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        return Fraction(
            num=numtheory.gcd(p.num, self.num) * numtheory.gcd(p.denom, self.denom),
            denom=p.denom * self.denom,
        )

    def lcm(self, a: Any = None, b: Any = None) -> Fraction:
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        if p.num == 0 and self.num == 0:
            return Fraction(num=0, denom=1)
        return Fraction(
            num=p.num * self.num,
            denom=numtheory.gcd(p.num, self.num) * numtheory.gcd(p.denom, self.denom),
        )

    def abs(self) -> Fraction:
        return self.updated_copy(sign=1)

    def neg(self) -> Fraction:
        return self.updated_copy(sign=-self.sign)

    def inverse(self) -> Fraction:
        if self.is_nan:
            return NAN
        return Fraction(sign=self.sign, num=self.denom, denom=self.num)

    def clone(self) -> Fraction:
        return self.updated_copy()

    def pow(self, a: Any = None, b: Any = None) -> Fraction | NoResult:
        """
        Raises this value to a rational power.

        Integer exponents always have an exact result. For fractional exponents the result is only
        exact if every prime exponent of numerator and denominator stays integral, e.g.
        (9/4) ** (1/2) == 3/2 but 2 ** (1/2) has no rational result.

        Returns:
            Fraction | NoResult: The exact power, or NO_RESULT if the result is irrational or the base is
            negative with a fractional exponent.
        """
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN

        # parsed exponents are not reduced, 6/3 is an integer exponent
        common = numtheory.gcd(p.num, p.denom)
        exp_num, exp_denom = p.num // common, p.denom // common

        bits = (max(self.num.bit_length(), self.denom.bit_length()) - 1) * exp_num // exp_denom
        if bits > MAX_POW_BITS:
            raise ExponentOverflow(f"Result of {self.to_fraction()} ** {p.sign * exp_num}/{exp_denom} needs ~{bits} bits")

        if exp_denom == 1:
            if p.sign < 0:
                return Fraction(num=(self.sign * self.denom) ** exp_num, denom=self.num**exp_num)
            return Fraction(num=(self.sign * self.num) ** exp_num, denom=self.denom**exp_num)

        if self.sign < 0:
            logger.debug("Negative base %s with fractional exponent has no rational result", self.to_fraction())
            return NO_RESULT
        if self.num == 0:
            return Fraction(num=0, denom=0 if p.sign < 0 else 1)

        num = _scaled_power(self.num, exp_num, exp_denom)
        denom = _scaled_power(self.denom, exp_num, exp_denom)
        if num is None or denom is None:
            logger.debug("%s ** (%d/%d) is irrational", self.to_fraction(), p.sign * exp_num, exp_denom)
            return NO_RESULT
        if p.sign < 0:
            return Fraction(num=denom, denom=num)
        return Fraction(num=num, denom=denom)

    # Rounding
    def _round_places(self, places: int, div) -> Fraction:
        if self.is_nan:
            return NAN
        scale = 10 ** abs(places)
        if places >= 0:
            return Fraction(num=div(self.sign * self.num * scale, self.denom), denom=scale)
        return Fraction(num=div(self.sign * self.num, self.denom * scale) * scale, denom=1)

    def ceil(self, places: int = 0) -> Fraction:
        """Smallest multiple of 10**-places that is not smaller than this value."""
        return self._round_places(places, _ceil_div)

    def floor(self, places: int = 0) -> Fraction:
        """Largest multiple of 10**-places that is not larger than this value."""
        return self._round_places(places, _floor_div)

    def round(self, places: int = 0) -> Fraction:
        """Nearest multiple of 10**-places, halves are rounded towards positive infinity."""
        return self._round_places(places, _half_up_div)

    def round_to(self, a: Any = None, b: Any = None) -> Fraction:
        """Nearest multiple of the given step. Halves are rounded away from zero."""
        p = _operand(a, b)
        if self._nan_with(p):
            return NAN
        if p.num == 0:
            raise DivisionByZero()
        multiple = _half_up_div(self.num * p.denom, self.denom * p.num)
        return Fraction(num=self.sign * multiple * p.num, denom=p.denom)

    def simplify(self, eps: float = DEFAULT_SIMPLIFY_EPS) -> Fraction:
        """
        Returns the fraction with the shortest continued fraction expansion that lies within eps of
        this value, e.g. fraction(0.333).simplify(0.01) == 1/3.

        Args:
            eps (float, optional): Absolute tolerance. Defaults to DEFAULT_SIMPLIFY_EPS.

        Returns:
            Fraction: The simplified value, or this value if no shorter expansion is close enough.
        """
        if self.is_nan:
            return self
        found = continued.simplest_convergent(self.num, self.denom, eps)
        if found is None:
            return self
        num, denom = found
        return Fraction(sign=self.sign, num=num, denom=denom)

    # Comparison
    def equals(self, a: Any = None, b: Any = None) -> bool:
        p = _operand(a, b)
        if self._nan_with(p):
            return False
        return self.sign * self.num * p.denom == p.sign * p.num * self.denom

    def compare(self, a: Any = None, b: Any = None) -> int:
        """Returns -1, 0 or 1 if this value is smaller, equal or larger. NaN compares as 0."""
        p = _operand(a, b)
        if self._nan_with(p):
            return 0
        t = self.sign * self.num * p.denom - p.sign * p.num * self.denom
        return (t > 0) - (t < 0)

    def divisible(self, a: Any = None, b: Any = None) -> bool:
        """True if this value is an integer multiple of the argument."""
        p = _operand(a, b)
        if self._nan_with(p):
            return False
        divisor = p.num * self.denom
        return divisor != 0 and (self.num * p.denom) % divisor == 0

    # Conversion
    def value(self) -> float:
        return self.sign * self.num / self.denom

    def to_continued(self) -> list[int]:
        if self.is_nan:
            return []
        return continued.continued_terms(self.num, self.denom)

    def to_fraction(self, exclude_whole: bool = False) -> str:
        if self.is_nan:
            return "NaN"
        return rendering.to_fraction(self.sign, self.num, self.denom, exclude_whole)

    def to_latex(self, exclude_whole: bool = False) -> str:
        if self.is_nan:
            return "NaN"
        return rendering.to_latex(self.sign, self.num, self.denom, exclude_whole)

    def to_string(self, decimals: int = DEFAULT_DECIMALS) -> str:
        if self.is_nan:
            return "NaN"
        return rendering.to_decimal(self.sign, self.num, self.denom, decimals)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self.to_fraction()})"

    # Python number protocol
    def __add__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Fraction:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.neg().add(other)

    def __mul__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> Fraction:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return fraction(other).div(self)

    def __mod__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return fraction(other).mod(self)

    def __pow__(self, other: Any) -> Fraction | NoResult:
        if not _is_operand(other):
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Any) -> Fraction | NoResult:
        if not _is_operand(other):
            return NotImplemented
        return fraction(other).pow(self)

    def __neg__(self) -> Fraction:
        return self.neg()

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return not self.equals(other)

    def _ordering(self, other: Any) -> int | None:
        p = _operand(other, None)
        if self._nan_with(p):
            return None
        return self.compare(other)

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        order = self._ordering(other)
        return order is not None and order < 0

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        order = self._ordering(other)
        return order is not None and order <= 0

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        order = self._ordering(other)
        return order is not None and order > 0

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        order = self._ordering(other)
        return order is not None and order >= 0

    def __hash__(self) -> int:
        if self.is_nan:
            return object.__hash__(self)
        # equal numbers hash equally, including int and fractions.Fraction
        return hash(fractions.Fraction(self.sign * self.num, self.denom))

    def __bool__(self) -> bool:
        return self.num != 0

    def __float__(self) -> float:
        return self.value()

    def __int__(self) -> int:
        if self.is_nan:
            raise ValueError("Cannot convert NaN fraction to integer")
        return self.sign * (self.num // self.denom)

    def __floor__(self) -> int:
        return int(self.floor())

    def __ceil__(self) -> int:
        return int(self.ceil())

    def __round__(self, ndigits: int | None = None) -> int | Fraction:
        if ndigits is None:
            return int(self.round())
        return self.round(ndigits)


NAN = Fraction(num=math.nan, denom=math.nan)

_OPERAND_TYPES = (
    Fraction,
    int,
    float,
    np.integer,
    np.floating,
    fractions.Fraction,
    decimal.Decimal,
)


def _is_operand(other: Any) -> bool:
    return isinstance(other, _OPERAND_TYPES)


def fraction(a: Any = None, b: Any = None) -> Fraction:
    """
    Builds a Fraction from any supported input.

    Accepted inputs:
        - nothing: zero
        - two integer-valued numbers: numerator and denominator, e.g. fraction(-3, 6) == -1/2
        - an int, float, numpy scalar, fractions.Fraction or decimal.Decimal
        - a record: {"n": 1, "d": 2} (with optional "s"), [1, 2], (1,)
        - a string: "3", "-1/2", "3:4", "1 1/2", "1.25", ".5", "0.(3)", "0.1'6'"
        - a single element numpy or jax array

    Floats are converted to the best rational approximation that reproduces their decimal value,
    e.g. fraction(0.1) == 1/10. NaN and infinity become the NaN fraction.

    Raises:
        DivisionByZero: if the denominator is zero.
        InvalidParameter: if the input cannot be parsed.
        NonIntegerParameter: if an explicit numerator or denominator is not integer-valued.
    """
    p = _operand(a, b)
    if p.is_nan:
        return NAN
    return Fraction(sign=p.sign, num=p.num, denom=p.denom)
