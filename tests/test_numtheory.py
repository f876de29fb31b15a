import logging

import pytest

from rationax.core import numtheory
from rationax.core.numtheory import cycle_len, cycle_start, factorize, gcd, modpow, trunc_mod


def test_gcd_handles_zero_and_signs():
    assert gcd(12, 18) == 6
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5
    assert gcd(-4, 6) == 2
    assert gcd(0, 0) == 0


def test_trunc_mod_keeps_sign_of_dividend():
    """Remainder follows truncating division, not Python's floor division"""
    assert trunc_mod(7, 2) == 1
    assert trunc_mod(-7, 2) == -1
    assert trunc_mod(7, -2) == 1
    assert trunc_mod(-6, 3) == 0


def test_modpow():
    assert modpow(3, 4, 5) == 1
    assert modpow(2, 10, 1000) == 24
    assert modpow(7, 0, 13) == 1
    assert modpow(10, 6, 7) == 1


def test_factorize():
    assert factorize(360) == {2: 3, 3: 2, 5: 1}
    assert factorize(97) == {97: 1}
    assert factorize(2**10) == {2: 10}
    assert factorize(1) == {}
    assert factorize(0) == {}


def test_factorize_result_is_immutable():
    factors = factorize(12)
    with pytest.raises(TypeError):
        factors[5] = 1  # type: ignore
    assert factors == {2: 2, 3: 1}


def test_cycle_len():
    assert cycle_len(1, 3) == 1
    assert cycle_len(1, 7) == 6
    assert cycle_len(1, 6) == 1
    assert cycle_len(1, 12) == 1
    assert cycle_len(5, 7) == 6
    assert cycle_len(1, 81) == 9


def test_cycle_len_terminating_decimals():
    assert cycle_len(1, 2) == 0
    assert cycle_len(3, 8) == 0
    assert cycle_len(7, 1) == 0
    assert cycle_len(1, 250) == 0


def test_cycle_len_stops_at_limit(monkeypatch, caplog):
    """Periods longer than the search limit are reported as 0 and logged"""
    monkeypatch.setattr(numtheory, "MAX_CYCLE_LEN", 3)
    with caplog.at_level(logging.DEBUG, logger="rationax"):
        assert cycle_len(1, 7) == 0
    assert "exceeds 3 digits" in caplog.text


def test_cycle_start():
    assert cycle_start(1, 3, 1) == 0
    assert cycle_start(1, 6, 1) == 1
    assert cycle_start(37037, 300, 1) == 2
    assert cycle_start(1, 7, 6) == 0
    assert cycle_start(1, 14, 6) == 1
