from numbers import Real
from typing import Any


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def is_real_number(value: Any) -> bool:
    """True for ints, floats and numpy scalars; False for bools and strings."""
    return isinstance(value, Real) and not isinstance(value, bool)
