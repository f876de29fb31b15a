"""
Exception hierarchy of rationax
===============================

    FractionError (base)
    ├── DivisionByZero - a canonical denominator would become 0
    ├── InvalidParameter - the input has no recognisable shape or grammar
    ├── NonIntegerParameter - numerator/denominator input that is not integer-valued
    └── ExponentOverflow - pow() result too large to build exactly

Every class also derives from the matching builtin exception, so callers that only know about
ZeroDivisionError or ValueError keep working.
"""


class FractionError(Exception):
    """Base class of all errors raised by rationax.

    Example:
        >>> try:
        ...     fraction("1/0")
        ... except FractionError as e:
        ...     print(f"rationax error: {e}")
        rationax error: Division by Zero
    """

    default_message = "Fraction error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class DivisionByZero(FractionError, ZeroDivisionError):
    """Raised when a construction or operation would produce a zero denominator.

    Examples:
        - fraction(1, 0)
        - fraction("3/0")
        - fraction(0).inverse()
    """

    default_message = "Division by Zero"


class InvalidParameter(FractionError, ValueError):
    """Raised when an input cannot be parsed into a fraction."""

    default_message = "Invalid argument"


class NonIntegerParameter(FractionError, ValueError):
    """Raised when an explicit numerator or denominator is not integer-valued.

    Examples:
        - fraction(1.5, 2)
        - fraction({"n": 1, "d": 0.5})
    """

    default_message = "Parameters must be integer"


class ExponentOverflow(FractionError, OverflowError):
    """Raised by pow() when the exact result would exceed MAX_POW_BITS."""

    default_message = "Exponent too large for an exact result"
