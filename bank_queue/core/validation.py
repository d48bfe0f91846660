"""Parameter checks shared by the simulation entry points."""

import numbers
import math

from bank_queue.core.exceptions import InvalidParameterError


def check_positive_int(name: str, value) -> int:
    """Return `value` as an int, or raise if it is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")
    return int(value)


def check_positive_rate(name: str, value) -> float:
    """Return `value` as a float, or raise unless it is a finite positive number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not (value > 0 and math.isfinite(value)):
        raise InvalidParameterError(f"{name} must be positive, got {value}")
    return float(value)
