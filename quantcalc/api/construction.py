"""
Construction estimate API endpoints.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from quantcalc.calculations import construction

router = APIRouter()


class ConcreteInput(BaseModel):
    length_ft: float
    width_ft: float
    depth_inches: float


class ConcreteResponse(BaseModel):
    cubic_feet: float
    cubic_yards: float
    bags_60lb: int
    bags_80lb: int


class PaintInput(BaseModel):
    area_sqft: float
    coats: int = construction.DEFAULT_COATS
    coverage_sqft_per_gallon: float = construction.DEFAULT_COVERAGE_SQFT_PER_GALLON


class PaintResponse(BaseModel):
    gallons: int


@router.post("/concrete", response_model=ConcreteResponse)
async def calculate_concrete(inputs: ConcreteInput):
    """Estimate concrete volume and premix bags for a slab."""
    result = construction.concrete(
        inputs.length_ft, inputs.width_ft, inputs.depth_inches
    )
    return ConcreteResponse(**result.to_dict())


@router.post("/paint", response_model=PaintResponse)
async def calculate_paint(inputs: PaintInput):
    """Estimate gallons of paint."""
    result = construction.paint(
        inputs.area_sqft, inputs.coats, inputs.coverage_sqft_per_gallon
    )
    return PaintResponse(**result.to_dict())
