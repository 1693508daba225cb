"""
Percentage and integer math API endpoints.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from quantcalc.calculations import arithmetic, finance

router = APIRouter()


class PercentageInput(BaseModel):
    value: float
    total: float


class PercentageResponse(BaseModel):
    percentage: float


class PercentageChangeInput(BaseModel):
    old_value: float
    new_value: float


class PercentageChangeResponse(BaseModel):
    percentage_change: float


class IntegerPairInput(BaseModel):
    a: int
    b: int


class GcdResponse(BaseModel):
    gcd: int


class LcmResponse(BaseModel):
    lcm: int


@router.post("/percentage", response_model=PercentageResponse)
async def calculate_percentage(inputs: PercentageInput):
    """What percent value is of total."""
    return PercentageResponse(
        percentage=finance.percentage(inputs.value, inputs.total)
    )


@router.post("/percentage-change", response_model=PercentageChangeResponse)
async def calculate_percentage_change(inputs: PercentageChangeInput):
    """Percent change between two values."""
    return PercentageChangeResponse(
        percentage_change=finance.percentage_change(
            inputs.old_value, inputs.new_value
        )
    )


@router.post("/gcd", response_model=GcdResponse)
async def calculate_gcd(inputs: IntegerPairInput):
    """Greatest common divisor of two integers."""
    return GcdResponse(gcd=arithmetic.gcd(inputs.a, inputs.b))


@router.post("/lcm", response_model=LcmResponse)
async def calculate_lcm(inputs: IntegerPairInput):
    """Least common multiple of two integers."""
    return LcmResponse(lcm=arithmetic.lcm(inputs.a, inputs.b))
