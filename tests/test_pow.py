import logging

import pytest

from rationax import NO_RESULT, DivisionByZero, ExponentOverflow, NoResult, fraction


def test_integer_exponents():
    assert fraction(2, 3).pow(2) == fraction(4, 9)
    assert fraction(2, 3).pow(-2) == fraction(9, 4)
    assert fraction(-2, 3).pow(3) == fraction(-8, 27)
    assert fraction(-2, 3).pow(-3) == fraction(-27, 8)
    assert fraction(-2, 3).pow(0) == 1
    assert fraction(1, 2) ** 2 == fraction(1, 4)


def test_rational_exponents():
    assert fraction(9, 4).pow("1/2") == fraction(3, 2)
    assert fraction(8, 27) ** fraction(2, 3) == fraction(4, 9)
    assert fraction(4).pow(-1, 2) == fraction(1, 2)
    assert fraction(1, 8).pow(1, 3) == fraction(1, 2)
    assert 4 ** fraction(1, 2) == 2


def test_irrational_results_return_marker(caplog):
    with caplog.at_level(logging.DEBUG, logger="rationax"):
        assert fraction(2).pow(0.5) is NO_RESULT
    assert "irrational" in caplog.text
    assert fraction(4, 3).pow(1, 2) is NO_RESULT
    assert 2 ** fraction(1, 2) is NO_RESULT


def test_negative_base_with_fractional_exponent():
    assert fraction(-4).pow(1, 2) is NO_RESULT
    assert fraction(-8).pow(1, 3) is NO_RESULT


def test_zero_base():
    assert fraction(0).pow(1, 2) == 0
    assert fraction(0).pow(3) == 0
    assert fraction(0).pow(0) == 1
    with pytest.raises(DivisionByZero):
        fraction(0).pow(-1, 2)
    with pytest.raises(DivisionByZero):
        fraction(0).pow(-1)


def test_no_result_marker():
    assert isinstance(NO_RESULT, NoResult)
    assert not NO_RESULT
    assert repr(NO_RESULT) == "NoResult"


def test_huge_results_raise():
    with pytest.raises(ExponentOverflow):
        fraction(2).pow(10**8)
    with pytest.raises(OverflowError):
        fraction(3, 2).pow(-(10**9))


def test_trivial_bases_ignore_exponent_size():
    assert fraction(1).pow(10**12) == 1
    assert fraction(-1).pow(10**12 + 1) == -1
    assert fraction(0).pow(10**12) == 0


def test_unreduced_exponents():
    """An exponent such as 6/3 is an integer exponent, also for negative bases"""
    assert fraction(-2).pow("6/3") == 4
    assert fraction(-2).pow(2, 2) == -2
    assert fraction(-2, 3).pow({"n": 6, "d": 2}) == fraction(-8, 27)
    assert fraction(-3).pow(-4, 2) == fraction(1, 9)
    assert fraction(9, 4).pow(2, 4) == fraction(3, 2)
    assert fraction(-4).pow(2, 4) is NO_RESULT
