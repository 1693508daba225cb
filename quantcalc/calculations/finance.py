"""
Finance Formulas

Stateless closed-form calculators: compound growth, ROI, tip splitting and
percentages. Rates are percentages (e.g., 5 for 5%). Results are rounded to
cents at the function boundary.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict

from quantcalc.calculations.errors import InvalidArgumentError
from quantcalc.calculations.validation import (
    require_finite,
    require_non_negative,
    require_nonzero_denominator,
    require_positive_int,
    round_currency,
)

DEFAULT_COMPOUNDS_PER_YEAR = 12


@dataclass(frozen=True)
class CompoundInterestResult:
    amount: float
    interest: float

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class TipResult:
    tip_amount: float
    total_amount: float
    per_person: float

    def to_dict(self) -> Dict:
        return asdict(self)


def compound_interest(
    principal: float,
    rate_percent: float,
    years: float,
    compounds_per_year: int = DEFAULT_COMPOUNDS_PER_YEAR,
) -> CompoundInterestResult:
    """
    Calculate compound growth.

    amount = principal * (1 + rate/100/k) ** (k * years)

    Args:
        principal: Initial investment
        rate_percent: Annual rate in percent, >= -100
        years: Number of years, >= 0
        compounds_per_year: Compounding frequency k, integer >= 1

    Returns:
        CompoundInterestResult with amount and interest earned

    Raises:
        InvalidArgumentError: on invalid inputs, or when the grown amount
            is too large to represent
    """
    require_finite(principal, "principal")
    require_finite(rate_percent, "rate_percent")
    if rate_percent < -100:
        raise InvalidArgumentError(
            f"rate_percent must be >= -100, got {rate_percent}"
        )
    require_non_negative(years, "years")
    require_positive_int(compounds_per_year, "compounds_per_year")

    periodic_rate = rate_percent / 100 / compounds_per_year
    try:
        growth = (1 + periodic_rate) ** (compounds_per_year * years)
    except OverflowError:
        growth = math.inf
    amount = principal * growth
    if not math.isfinite(amount):
        raise InvalidArgumentError(
            f"compound growth at {rate_percent}% over {years} years "
            f"exceeds the floating-point range"
        )

    return CompoundInterestResult(
        amount=round_currency(amount),
        interest=round_currency(amount - principal),
    )


def roi(gain: float, cost: float) -> float:
    """Return on investment as a percentage of cost."""
    require_finite(gain, "gain")
    require_nonzero_denominator(cost, "cost")
    return round_currency(gain / cost * 100)


def tip_calculator(amount: float, tip_percent: float, people: int = 1) -> TipResult:
    """
    Calculate tip, total and per-person share.

    Args:
        amount: Bill total
        tip_percent: Tip percentage
        people: Number of people splitting, positive integer

    Returns:
        TipResult rounded to cents
    """
    require_finite(amount, "amount")
    require_finite(tip_percent, "tip_percent")
    require_positive_int(people, "people")

    tip_amount = amount * tip_percent / 100
    total_amount = amount + tip_amount

    return TipResult(
        tip_amount=round_currency(tip_amount),
        total_amount=round_currency(total_amount),
        per_person=round_currency(total_amount / people),
    )


def percentage(value: float, total: float) -> float:
    """What percent value is of total."""
    require_finite(value, "value")
    require_nonzero_denominator(total, "total")
    return round_currency(value / total * 100)


def percentage_change(old_value: float, new_value: float) -> float:
    """Relative change from old_value to new_value, in percent."""
    require_finite(new_value, "new_value")
    require_nonzero_denominator(old_value, "old_value")
    return round_currency((new_value - old_value) / old_value * 100)
