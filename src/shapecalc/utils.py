import math
from numbers import Real

from shapecalc.errors import InvalidDimension


def is_finite_real(value: object) -> bool:
    """True for int/float-like values that are not bool, NaN or infinite."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)

def ensure_non_negative(name: str, value: object) -> float:
    """Validate a length-like attribute and return it as float."""
    if not is_finite_real(value):
        raise InvalidDimension(f"'{name}' must be a finite real number, got {value!r}.")
    if value < 0:
        raise InvalidDimension(f"'{name}' must be non-negative, got {value!r}.")
    return float(value)

def ensure_finite(name: str, value: object) -> float:
    """Validate a coordinate (may be negative) and return it as float."""
    if not is_finite_real(value):
        raise InvalidDimension(f"'{name}' must be a finite real number, got {value!r}.")
    return float(value)
