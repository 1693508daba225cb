"""
Loan Amortization Calculations

Implements the annuity payment formula and the full amortization schedule.
Rates are annual percentages (e.g., 5.5 for 5.5%). Schedule rows keep full
floating precision; rounding to cents happens only in the summary records.
"""

import logging
import math
import sys
from dataclasses import asdict, dataclass
from datetime import date
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from quantcalc.calculations.errors import InvalidArgumentError
from quantcalc.calculations.validation import (
    require_non_negative,
    require_positive,
    require_positive_int,
    round_currency,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

# Max relative error of the summed principal portions of a schedule
SCHEDULE_RELATIVE_TOLERANCE = 1e-6


@dataclass(frozen=True)
class LoanParameters:
    """Validated loan inputs."""

    principal: float
    annual_rate_percent: float
    term_months: int

    def __post_init__(self):
        require_positive(self.principal, "principal")
        require_non_negative(self.annual_rate_percent, "annual_rate_percent")
        require_positive_int(self.term_months, "term_months")

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / MONTHS_PER_YEAR


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """One period of an amortization schedule."""

    period: int
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float
    payment_date: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class LoanPaymentResult:
    """Payment summary for a fully amortizing loan."""

    monthly_payment: float
    total_paid: float
    total_interest: float

    def to_dict(self) -> Dict:
        return asdict(self)


def _log_growth(loan: LoanParameters, periods: int) -> float:
    """log((1 + r) ** periods), exact for rates too small to move 1 + r."""
    return periods * math.log1p(loan.monthly_rate)


def _payment_for(loan: LoanParameters) -> float:
    r = loan.monthly_rate
    n = loan.term_months

    if r == 0:
        # Flat amortization
        return loan.principal / n

    # P*r*g/(g - 1) rewritten as P*r/(1 - 1/g); never overflows
    return loan.principal * r / -math.expm1(-_log_growth(loan, n))


def _check_schedule_precision(loan: LoanParameters) -> None:
    """
    Reject loans whose schedule cannot keep principal portions summing to
    the principal within SCHEDULE_RELATIVE_TOLERANCE.

    Floating error in the running balance grows by (1 + r) each period, so
    the bound is (1 + r) ** n * n * machine epsilon.
    """
    if loan.monthly_rate == 0:
        return
    log_error = (
        _log_growth(loan, loan.term_months)
        + math.log(loan.term_months)
        + math.log(sys.float_info.epsilon)
    )
    if log_error > math.log(SCHEDULE_RELATIVE_TOLERANCE):
        raise InvalidArgumentError(
            f"rate {loan.annual_rate_percent}% over {loan.term_months} months "
            f"is too steep to amortize within a relative tolerance of "
            f"{SCHEDULE_RELATIVE_TOLERANCE}"
        )


def monthly_payment(
    principal: float, annual_rate_percent: float, term_months: int
) -> float:
    """
    Calculate the constant monthly payment.

    Matches Excel's PMT() function (sign flipped to positive).

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent (e.g., 6 for 6%)
        term_months: Number of monthly payments

    Returns:
        Monthly payment, unrounded. Exactly principal / term_months when the
        rate is zero.

    Raises:
        InvalidArgumentError: principal <= 0, rate < 0 or term_months <= 0
    """
    return _payment_for(LoanParameters(principal, annual_rate_percent, term_months))


def _years_to_months(years: float) -> int:
    require_positive(years, "years")
    months = years * MONTHS_PER_YEAR
    if not float(months).is_integer():
        raise InvalidArgumentError(
            f"years must cover a whole number of months, got {years}"
        )
    return int(months)


def _summarize(loan: LoanParameters) -> LoanPaymentResult:
    payment = _payment_for(loan)

    if loan.monthly_rate == 0:
        return LoanPaymentResult(
            monthly_payment=round_currency(payment),
            total_paid=round_currency(loan.principal),
            total_interest=0.0,
        )

    total_paid = payment * loan.term_months
    return LoanPaymentResult(
        monthly_payment=round_currency(payment),
        total_paid=round_currency(total_paid),
        total_interest=round_currency(total_paid - loan.principal),
    )


def loan_payment(
    principal: float, annual_rate_percent: float, term_months: int
) -> LoanPaymentResult:
    """Monthly payment, total paid and total interest for a term in months."""
    return _summarize(LoanParameters(principal, annual_rate_percent, term_months))


def mortgage_payment(
    principal: float, annual_rate_percent: float, years: float
) -> LoanPaymentResult:
    """
    Calculate a mortgage payment summary.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual interest rate in percent
        years: Loan term in years

    Returns:
        LoanPaymentResult rounded to cents
    """
    return loan_payment(principal, annual_rate_percent, _years_to_months(years))


def remaining_balance(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    payments_made: int,
) -> float:
    """Calculate remaining loan balance after N payments (closed form)."""
    loan = LoanParameters(principal, annual_rate_percent, term_months)
    if isinstance(payments_made, bool) or not isinstance(payments_made, int):
        raise InvalidArgumentError(
            f"payments_made must be an integer, got {payments_made!r}"
        )
    if not 0 <= payments_made <= term_months:
        raise InvalidArgumentError(
            f"payments_made must be between 0 and {term_months}, got {payments_made}"
        )

    r = loan.monthly_rate
    payment = _payment_for(loan)

    if r == 0:
        return max(0.0, principal - payment * payments_made)

    # P * (g_n - g_k) / (g_n - 1), scaled by 1/g_n to stay in range
    balance = principal * (
        math.expm1(_log_growth(loan, payments_made - term_months))
        / math.expm1(-_log_growth(loan, term_months))
    )

    return max(0.0, balance)


def build_schedule(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    start_date: Optional[date] = None,
) -> List[PaymentScheduleEntry]:
    """
    Generate a full amortization schedule.

    The running balance is never rounded or clamped between periods; only the
    reported remaining_balance is clamped at zero. The final period is not
    adjusted to absorb floating-point drift.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent
        term_months: Number of monthly payments
        start_date: Date of first payment; when given each row carries its date

    Returns:
        Exactly term_months schedule entries

    Raises:
        InvalidArgumentError: on invalid loan parameters, or when rate and term
            compound too steeply for the schedule to stay accurate; raised
            before any row is built
    """
    loan = LoanParameters(principal, annual_rate_percent, term_months)
    _check_schedule_precision(loan)
    r = loan.monthly_rate
    payment = _payment_for(loan)

    logger.debug(
        "Building %d-period schedule for principal=%s rate=%s%%",
        term_months,
        principal,
        annual_rate_percent,
    )

    schedule = []
    balance = loan.principal

    for period in range(1, loan.term_months + 1):
        interest = balance * r
        principal_pmt = payment - interest
        balance -= principal_pmt

        period_date = None
        if start_date is not None:
            period_date = (start_date + relativedelta(months=period - 1)).isoformat()

        schedule.append(
            PaymentScheduleEntry(
                period=period,
                payment=payment,
                principal_portion=principal_pmt,
                interest_portion=interest,
                remaining_balance=max(0.0, balance),
                payment_date=period_date,
            )
        )

    return schedule


def amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    years: float,
    start_date: Optional[date] = None,
) -> List[PaymentScheduleEntry]:
    """Amortization schedule for a term given in years."""
    return build_schedule(
        principal, annual_rate_percent, _years_to_months(years), start_date
    )


def schedule_totals(schedule: List[PaymentScheduleEntry]) -> Dict[str, float]:
    """Total paid, interest and principal over a schedule, rounded to cents."""
    return {
        "total_paid": round_currency(sum(row.payment for row in schedule)),
        "total_interest": round_currency(sum(row.interest_portion for row in schedule)),
        "total_principal": round_currency(
            sum(row.principal_portion for row in schedule)
        ),
    }
