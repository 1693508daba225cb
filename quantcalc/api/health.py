"""
Health calculation API endpoints.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from quantcalc.calculations import health

router = APIRouter()


class BMIInput(BaseModel):
    weight_kg: float
    height_cm: float


class BMIResponse(BaseModel):
    bmi: float
    category: str


@router.post("/bmi", response_model=BMIResponse)
async def calculate_bmi(inputs: BMIInput):
    """Calculate Body Mass Index and its category."""
    result = health.bmi(inputs.weight_kg, inputs.height_cm)
    return BMIResponse(**result.to_dict())


class BMRInput(BaseModel):
    weight_kg: float
    height_cm: float
    age: float
    gender: str


class BMRResponse(BaseModel):
    bmr: float


@router.post("/bmr", response_model=BMRResponse)
async def calculate_bmr(inputs: BMRInput):
    """Calculate Basal Metabolic Rate (Mifflin-St Jeor)."""
    return BMRResponse(
        bmr=health.bmr(inputs.weight_kg, inputs.height_cm, inputs.age, inputs.gender)
    )


class TDEEInput(BaseModel):
    bmr_value: float
    activity_level: str = "moderate"


class TDEEResponse(BaseModel):
    tdee: float


@router.post("/tdee", response_model=TDEEResponse)
async def calculate_tdee(inputs: TDEEInput):
    """Calculate Total Daily Energy Expenditure."""
    return TDEEResponse(tdee=health.tdee(inputs.bmr_value, inputs.activity_level))


class IdealWeightInput(BaseModel):
    height_cm: float
    gender: str


class IdealWeightResponse(BaseModel):
    devine: float
    robinson: float
    miller: float
    hamwi: float


@router.post("/ideal-weight", response_model=IdealWeightResponse)
async def calculate_ideal_weight(inputs: IdealWeightInput):
    """Ideal body weight by four formulas."""
    result = health.ideal_weight(inputs.height_cm, inputs.gender)
    return IdealWeightResponse(**result.to_dict())
