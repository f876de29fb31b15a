from __future__ import annotations

import math
from typing import Any

from jax import core


def is_traced(x: Any) -> bool:
    return isinstance(x, core.Tracer)


def is_nan(x: Any) -> bool:
    return isinstance(x, float) and math.isnan(x)
