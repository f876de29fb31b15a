from rationax.core.exceptions import (
    DivisionByZero,
    ExponentOverflow,
    FractionError,
    InvalidParameter,
    NonIntegerParameter,
)
from rationax.core.fraction import NAN, Fraction, fraction
from rationax.core.log import enable_console_logging, get_logger
from rationax.core.null import NO_RESULT, NoResult
from rationax.core.parsing import ParsedFraction, parse

__all__ = [
    "Fraction",
    "fraction",
    "parse",
    "ParsedFraction",
    "NAN",
    "NO_RESULT",
    "NoResult",
    "FractionError",
    "DivisionByZero",
    "InvalidParameter",
    "NonIntegerParameter",
    "ExponentOverflow",
    "enable_console_logging",
    "get_logger",
]
