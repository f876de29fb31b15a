"""
Upper bound for numerators and denominators explored by the Farey mediant search that converts
a float into a fraction. The search stops once either bracket denominator grows past this value.
"""
FAREY_BOUND: int = 10_000_000

"""
Maximum search depth for the period of a repeating decimal. 1/7 = 0.(142857) has a period of 6.
Longer periods are not detected and to_string() falls back to a bounded number of digits.
"""
MAX_CYCLE_LEN: int = 2000

"""Maximum offset searched for the start of a repeating block (roughly log10 of the largest float)"""
MAX_CYCLE_START: int = 300

"""Number of decimal places rendered by to_string() for non-repeating or undetected expansions"""
DEFAULT_DECIMALS: int = 15

"""Default absolute tolerance of Fraction.simplify()"""
DEFAULT_SIMPLIFY_EPS: float = 1e-3

"""
Largest estimated result size (in bits of numerator or denominator) that pow() is allowed to produce.
Larger results raise ExponentOverflow instead of exhausting memory.
"""
MAX_POW_BITS: int = 1 << 24
