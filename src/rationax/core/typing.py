from __future__ import annotations

from typing import Union

import jax
import numpy as np

# Integral scalars accepted as exact numerators and denominators
IntegerLike = Union[
    int,
    np.integer,
]

# Binary floating point scalars, converted by best rational approximation
FloatLike = Union[
    float,
    np.floating,
]

NumberLike = Union[
    int,
    float,
    np.integer,
    np.floating,
]

# Containers whose single element can be parsed after materialising it with .item()
ArrayLike = Union[
    jax.Array,
    np.ndarray,
]
