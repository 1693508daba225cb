"""
Finance calculation API endpoints.

These endpoints accept inputs and return calculated results. Engine errors
are turned into 400 responses by the application's exception handler.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, model_validator

from quantcalc.calculations import amortization, finance
from quantcalc.calculations.validation import round_currency
from quantcalc.config import get_settings

router = APIRouter()
settings = get_settings()


class CompoundInterestInput(BaseModel):
    """Input for compound interest calculation."""

    principal: float
    rate_percent: float
    years: float
    compounds_per_year: int = finance.DEFAULT_COMPOUNDS_PER_YEAR


class CompoundInterestResponse(BaseModel):
    amount: float
    interest: float


@router.post("/compound-interest", response_model=CompoundInterestResponse)
async def calculate_compound_interest(inputs: CompoundInterestInput):
    """Calculate compound growth of an investment."""
    result = finance.compound_interest(
        inputs.principal,
        inputs.rate_percent,
        inputs.years,
        inputs.compounds_per_year,
    )
    return CompoundInterestResponse(**result.to_dict())


class ROIInput(BaseModel):
    gain: float
    cost: float


class ROIResponse(BaseModel):
    roi: float


@router.post("/roi", response_model=ROIResponse)
async def calculate_roi(inputs: ROIInput):
    """Calculate return on investment in percent."""
    return ROIResponse(roi=finance.roi(inputs.gain, inputs.cost))


class TipInput(BaseModel):
    amount: float
    tip_percent: float
    people: int = 1


class TipResponse(BaseModel):
    tip_amount: float
    total_amount: float
    per_person: float


@router.post("/tip", response_model=TipResponse)
async def calculate_tip(inputs: TipInput):
    """Calculate tip and per-person split."""
    result = finance.tip_calculator(inputs.amount, inputs.tip_percent, inputs.people)
    return TipResponse(**result.to_dict())


class LoanPaymentResponse(BaseModel):
    """Payment summary for a loan."""

    monthly_payment: float
    total_paid: float
    total_interest: float


class MortgageInput(BaseModel):
    principal: float
    annual_rate_percent: float
    years: float


@router.post("/mortgage", response_model=LoanPaymentResponse)
async def calculate_mortgage(inputs: MortgageInput):
    """Calculate a mortgage payment from a term in years."""
    result = amortization.mortgage_payment(
        inputs.principal, inputs.annual_rate_percent, inputs.years
    )
    return LoanPaymentResponse(**result.to_dict())


class LoanPaymentInput(BaseModel):
    principal: float
    annual_rate_percent: float
    term_months: int


@router.post("/loan-payment", response_model=LoanPaymentResponse)
async def calculate_loan_payment(inputs: LoanPaymentInput):
    """Calculate a loan payment from a term in months."""
    result = amortization.loan_payment(
        inputs.principal, inputs.annual_rate_percent, inputs.term_months
    )
    return LoanPaymentResponse(**result.to_dict())


class AmortizationInput(BaseModel):
    """Input for amortization schedule; give either term_months or years."""

    principal: float
    annual_rate_percent: float
    term_months: Optional[int] = None
    years: Optional[float] = None
    start_date: Optional[date] = None

    @model_validator(mode="after")
    def check_term(self):
        if (self.term_months is None) == (self.years is None):
            raise ValueError("Provide exactly one of term_months or years")
        return self


class ScheduleRow(BaseModel):
    period: int
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float
    payment_date: Optional[str] = None


class AmortizationResponse(BaseModel):
    """Response with schedule and totals."""

    monthly_payment: float
    total_paid: float
    total_interest: float
    total_principal: float
    schedule: List[ScheduleRow]


@router.post("/amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: AmortizationInput):
    """Generate loan amortization schedule."""
    if inputs.term_months is not None:
        schedule_months = inputs.term_months
    else:
        schedule_months = inputs.years * 12

    if schedule_months > settings.max_schedule_months:
        raise HTTPException(
            status_code=422,
            detail=f"Schedule limited to {settings.max_schedule_months} months",
        )

    if inputs.term_months is not None:
        schedule = amortization.build_schedule(
            inputs.principal,
            inputs.annual_rate_percent,
            inputs.term_months,
            inputs.start_date,
        )
    else:
        schedule = amortization.amortization_schedule(
            inputs.principal,
            inputs.annual_rate_percent,
            inputs.years,
            inputs.start_date,
        )

    totals = amortization.schedule_totals(schedule)

    return AmortizationResponse(
        monthly_payment=round_currency(schedule[0].payment),
        schedule=[ScheduleRow(**row.to_dict()) for row in schedule],
        **totals,
    )
