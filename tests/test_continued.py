import pytest

from rationax import NAN, fraction
from rationax.core.continued import continued_terms, from_continued, simplest_convergent


def test_continued_terms():
    assert continued_terms(415, 93) == [4, 2, 6, 7]
    assert continued_terms(0, 1) == [0]
    assert continued_terms(5, 1) == [5]
    assert continued_terms(1, 3) == [0, 3]


def test_from_continued():
    assert from_continued([4, 2, 6, 7]) == (415, 93)
    assert from_continued([0, 3]) == (1, 3)
    assert from_continued([5]) == (5, 1)
    with pytest.raises(ValueError):
        from_continued([])


def test_simplest_convergent():
    assert simplest_convergent(333, 1000, 0.01) == (1, 3)
    assert simplest_convergent(415, 93, 0.5) == (4, 1)
    assert simplest_convergent(333, 1000, 1e-9) is None
    assert simplest_convergent(1, 1, 0.1) is None


def test_to_continued():
    assert fraction(415, 93).to_continued() == [4, 2, 6, 7]
    assert fraction(-415, 93).to_continued() == [4, 2, 6, 7]
    assert fraction(3).to_continued() == [3]
    assert NAN.to_continued() == []


def test_simplify():
    assert fraction(0.333).simplify(0.01) == fraction(1, 3)
    assert fraction(-0.333).simplify(0.01) == fraction(-1, 3)
    assert fraction(333, 1000).simplify(1e-9) == fraction(333, 1000)
    assert fraction(22, 7).simplify() == fraction(22, 7)
    assert fraction(355, 113).simplify(0.01) == fraction(22, 7)
    assert NAN.simplify().is_nan
