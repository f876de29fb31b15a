import decimal
import fractions

import jax
import jax.numpy as jnp
import numpy as np

from rationax import fraction


def test_fraction_has_no_pytree_leaves():
    """All fields are frozen, so jax treats a fraction as static structure"""
    assert jax.tree_util.tree_leaves(fraction(1, 2)) == []


def test_tree_map_round_trip():
    f = fraction(-5, 3)
    assert jax.tree_util.tree_map(lambda x: x, f) == f


def test_fraction_as_jit_argument():
    scaled = jax.jit(lambda x, f: x * f.value())(jnp.asarray(4.0), fraction(1, 4))
    assert float(scaled) == 1.0


def test_numpy_scalars():
    assert fraction(np.int64(3), np.int64(4)) == fraction(3, 4)
    assert fraction(np.float64(0.5)) == fraction(1, 2)
    assert fraction(np.uint8(7)) == 7
    assert fraction(1, 2).mul(np.int32(4)) == 2
    assert fraction(1, 2) + np.float32(0.25) == fraction(3, 4)


def test_single_element_arrays():
    assert fraction(jnp.asarray(3)) == 3
    assert fraction(np.array([[0.75]])) == fraction(3, 4)


def test_python_number_types():
    assert fraction(fractions.Fraction(6, -4)) == fraction(-3, 2)
    assert fraction(decimal.Decimal("0.125")) == fraction(1, 8)
    assert fraction(decimal.Decimal("Infinity")).is_nan
    assert fraction(1, 3) - decimal.Decimal("0.5") == fraction(-1, 6)
