"""
Health Formulas

Body-composition and energy-expenditure calculators. Inputs are metric
(kg, cm, years). Outputs are not rounded.
"""

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Dict, Mapping

from quantcalc.calculations.validation import require_finite, require_positive

MALE = "male"

# Mifflin-St Jeor daily activity multipliers
ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "sedentary": 1.2,
        "light": 1.375,
        "moderate": 1.55,
        "active": 1.725,
        "very_active": 1.9,
    }
)
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]

FIVE_FEET_CM = 152.4
CM_PER_INCH = 2.54

# (base kg, kg per inch over five feet)
_IDEAL_WEIGHT_COEFFICIENTS = MappingProxyType(
    {
        MALE: MappingProxyType(
            {
                "devine": (50.0, 2.3),
                "robinson": (52.0, 1.9),
                "miller": (56.2, 1.41),
                "hamwi": (48.0, 2.7),
            }
        ),
        "female": MappingProxyType(
            {
                "devine": (45.5, 2.3),
                "robinson": (49.0, 1.7),
                "miller": (53.1, 1.36),
                "hamwi": (45.5, 2.2),
            }
        ),
    }
)


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class IdealWeightResult:
    """Ideal body weight in kg by formula."""

    devine: float
    robinson: float
    miller: float
    hamwi: float

    def to_dict(self) -> Dict:
        return asdict(self)


def bmi_category(value: float) -> str:
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal"
    if value < 30:
        return "Overweight"
    return "Obese"


def bmi(weight_kg: float, height_cm: float) -> BMIResult:
    """
    Calculate Body Mass Index.

    BMI = weight_kg / (height_m)^2

    Raises:
        InvalidArgumentError: height_cm <= 0
    """
    require_finite(weight_kg, "weight_kg")
    require_positive(height_cm, "height_cm")

    height_m = height_cm / 100
    value = weight_kg / (height_m * height_m)
    return BMIResult(bmi=value, category=bmi_category(value))


def bmr(weight_kg: float, height_cm: float, age: float, gender: str) -> float:
    """
    Basal Metabolic Rate in kcal/day (Mifflin-St Jeor).

    Any gender other than "male" uses the female constant.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == MALE else base - 161


def tdee(bmr_value: float, activity_level: str) -> float:
    """Total Daily Energy Expenditure; unknown levels use the moderate multiplier."""
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
    return bmr_value * multiplier


def ideal_weight(height_cm: float, gender: str) -> IdealWeightResult:
    """Devine, Robinson, Miller and Hamwi ideal weights for a height."""
    require_finite(height_cm, "height_cm")

    inches_over_five_feet = (height_cm - FIVE_FEET_CM) / CM_PER_INCH
    coefficients = _IDEAL_WEIGHT_COEFFICIENTS[MALE if gender == MALE else "female"]

    return IdealWeightResult(
        **{
            name: base + per_inch * inches_over_five_feet
            for name, (base, per_inch) in coefficients.items()
        }
    )
