"""
Input guards and rounding shared by the calculation modules.
"""

import math

from quantcalc.calculations.errors import DivisionByZeroError, InvalidArgumentError

CURRENCY_DECIMALS = 2


def round_currency(value: float) -> float:
    """Round a money amount to cents. Applied at formula boundaries only."""
    return round(value, CURRENCY_DECIMALS)


def require_finite(value: float, name: str) -> None:
    """Reject NaN/Inf and non-numeric input."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")


def require_positive(value: float, name: str) -> None:
    require_finite(value, name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


def require_non_negative(value: float, name: str) -> None:
    require_finite(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def require_positive_int(value: int, name: str) -> None:
    """Integers only; bool and integral floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value}")


def require_nonzero_denominator(value: float, name: str) -> None:
    require_finite(value, name)
    if value == 0:
        raise DivisionByZeroError(f"{name} must not be zero")
