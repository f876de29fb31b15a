from __future__ import annotations


class NoResult:
    """Marker returned by Fraction.pow() when no exact rational result exists, e.g. 2 ** (1/2)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NoResult"

    def __str__(self) -> str:
        return repr(self)

    def __bool__(self):
        return False


NO_RESULT = NoResult()
