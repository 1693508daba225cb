"""
Calculation Errors

All engine failures derive from CalculationError, which is a ValueError so
callers that already guard numeric input with ``except ValueError`` keep working.
"""

from typing import List, Optional


class CalculationError(ValueError):
    """Base class for every error raised by the calculation engine."""


class InvalidArgumentError(CalculationError):
    """Non-positive or out-of-domain numeric input."""


class DivisionByZeroError(CalculationError):
    """Zero denominator in a ratio formula."""


class UnknownConversionError(CalculationError):
    """
    Unregistered conversion name or unit token.

    Carries the valid names in ``available`` so callers can self-correct.
    """

    def __init__(self, name: str, available: Optional[List[str]] = None, kind: str = "conversion"):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(
            f"Unknown {kind}: {name}. Available: {', '.join(self.available)}"
        )
