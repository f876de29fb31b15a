import pytest

from rationax import NAN, fraction


@pytest.mark.parametrize(
    "value, expected",
    [
        (fraction(1, 3), "0.(3)"),
        (fraction(1, 7), "0.(142857)"),
        (fraction(1, 2), "0.5"),
        (fraction(1, 6), "0.1(6)"),
        (fraction(-22, 7), "-3.(142857)"),
        (fraction(1, 14), "0.0(714285)"),
        (fraction("123.45(6)"), "123.45(6)"),
        (fraction(5), "5"),
        (fraction(-5), "-5"),
        (fraction(0), "0"),
        (fraction(-3, 8), "-0.375"),
    ],
)
def test_to_string(value, expected):
    assert value.to_string() == expected
    assert str(value) == expected


def test_to_string_limits_terminating_decimals():
    assert fraction(1, 8).to_string(2) == "0.12"
    assert fraction(1, 8).to_string(0) == "0"
    assert fraction(1, 1024).to_string() == "0.0009765625"
    assert fraction(1, 2**20).to_string() == "0.000000953674316"


def test_repeating_decimal_round_trip():
    for text in ["0.(3)", "1.1(6)", "-2.(142857)", "0.0(714285)", "7.25"]:
        assert fraction(text).to_string() == text


def test_to_fraction():
    assert fraction(-7, 2).to_fraction() == "-7/2"
    assert fraction(-7, 2).to_fraction(True) == "-3 1/2"
    assert fraction(1, 2).to_fraction(True) == "1/2"
    assert fraction(3).to_fraction(True) == "3"
    assert fraction(0).to_fraction() == "0"


def test_to_latex():
    assert fraction(-7, 2).to_latex() == "-\\frac{7}{2}"
    assert fraction(-7, 2).to_latex(True) == "-3\\frac{1}{2}"
    assert fraction(4).to_latex() == "4"


def test_nan_rendering():
    assert NAN.to_string() == "NaN"
    assert NAN.to_fraction() == "NaN"
    assert NAN.to_latex() == "NaN"


def test_repr():
    assert repr(fraction(1, 3)) == "Fraction(1/3)"
    assert repr(fraction(-4)) == "Fraction(-4)"
