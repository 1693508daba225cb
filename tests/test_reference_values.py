"""
Reference Value Parity Tests

Checks the engine against published reference figures (standard mortgage
tables, compound-interest tables, textbook Mifflin-St Jeor examples).

Run with: pytest tests/test_reference_values.py -v
"""

import pytest

from quantcalc.calculations.amortization import build_schedule, monthly_payment
from quantcalc.calculations.finance import compound_interest
from quantcalc.calculations.health import bmr, tdee


# Tolerances
TOL_PAYMENT = 0.005          # half a cent on monthly payments
TOL_AMOUNT = 0.01            # one cent on rounded balances
TOL_CALORIES = 1e-9


# -----------------------------------------------------------------------------
# Monthly payments (principal, annual %, months, payment)
# -----------------------------------------------------------------------------

PAYMENT_BENCHMARKS = [
    (200000, 6.0, 360, 1199.10),
    (250000, 4.5, 360, 1266.71),
    (100000, 6.0, 60, 1933.28),
    (300000, 3.0, 180, 2071.74),
    (25000, 7.0, 48, 598.66),
]


@pytest.mark.parametrize("principal, rate, months, expected", PAYMENT_BENCHMARKS)
def test_payment_table(principal, rate, months, expected):
    assert monthly_payment(principal, rate, months) == pytest.approx(expected, abs=TOL_PAYMENT)


@pytest.mark.parametrize("principal, rate, months, expected", PAYMENT_BENCHMARKS)
def test_schedule_uses_table_payment(principal, rate, months, expected):
    """Every row pays the same table amount."""
    schedule = build_schedule(principal, rate, months)
    assert all(row.payment == pytest.approx(expected, abs=TOL_PAYMENT) for row in schedule)


# -----------------------------------------------------------------------------
# Compound growth (principal, annual %, years, periods/year, amount)
# -----------------------------------------------------------------------------

COMPOUND_BENCHMARKS = [
    (1000, 5, 1, 12, 1051.16),
    (1000, 5, 10, 1, 1628.89),
    (1000, 5, 10, 12, 1647.01),
    (5000, 3, 5, 4, 5805.92),
]


@pytest.mark.parametrize("principal, rate, years, k, expected", COMPOUND_BENCHMARKS)
def test_compound_table(principal, rate, years, k, expected):
    assert compound_interest(principal, rate, years, k).amount == pytest.approx(
        expected, abs=TOL_AMOUNT
    )


# -----------------------------------------------------------------------------
# Energy expenditure
# -----------------------------------------------------------------------------


def test_mifflin_st_jeor_reference():
    """80 kg, 180 cm, 25 year old male."""
    value = bmr(80, 180, 25, "male")
    assert value == pytest.approx(1805, abs=TOL_CALORIES)
    assert tdee(value, "active") == pytest.approx(1805 * 1.725, abs=TOL_CALORIES)
