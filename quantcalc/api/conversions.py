"""
Unit conversion API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from quantcalc.calculations import conversions

router = APIRouter()


class NamedConversionInput(BaseModel):
    """Input for a named one-way conversion such as kmToMiles."""

    value: float
    conversion: str


class UnitConversionInput(BaseModel):
    """Input for a conversion between two units of one quantity."""

    value: float
    from_unit: str
    to_unit: str
    quantity: str


class ConversionResponse(BaseModel):
    value: float
    result: float


class ConversionListResponse(BaseModel):
    conversions: List[str]


class UnitListResponse(BaseModel):
    quantity: str
    units: List[str]


@router.get("", response_model=ConversionListResponse)
async def list_conversions(quantity: Optional[str] = None):
    """List registered conversion names."""
    return ConversionListResponse(
        conversions=conversions.available_conversions(quantity)
    )


@router.post("", response_model=ConversionResponse)
async def convert_named(inputs: NamedConversionInput):
    """Apply a named conversion."""
    return ConversionResponse(
        value=inputs.value,
        result=conversions.convert(inputs.value, inputs.conversion),
    )


@router.get("/units/{quantity}", response_model=UnitListResponse)
async def list_units(quantity: str):
    """List unit tokens accepted for a quantity."""
    return UnitListResponse(
        quantity=quantity, units=conversions.available_units(quantity)
    )


@router.post("/units", response_model=ConversionResponse)
async def convert_between_units(inputs: UnitConversionInput):
    """Convert between two units of the same quantity."""
    return ConversionResponse(
        value=inputs.value,
        result=conversions.convert_units(
            inputs.value, inputs.from_unit, inputs.to_unit, inputs.quantity
        ),
    )
