"""
Integer helpers: greatest common divisor and least common multiple.
"""

from quantcalc.calculations.errors import InvalidArgumentError


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(0, 0) == 0."""
    _require_int(a, "a")
    _require_int(b, "b")
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 when either argument is 0."""
    divisor = gcd(a, b)
    if divisor == 0 or a == 0 or b == 0:
        return 0
    return abs(a * b) // divisor
