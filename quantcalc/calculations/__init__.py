"""
Quantitative Calculation Engine

Pure, synchronous calculators for finance, health, unit conversion and a few
construction estimates. Nothing here performs I/O or holds mutable state.
"""

from quantcalc.calculations.amortization import (
    LoanParameters,
    LoanPaymentResult,
    PaymentScheduleEntry,
    amortization_schedule,
    build_schedule,
    loan_payment,
    monthly_payment,
    mortgage_payment,
    remaining_balance,
    schedule_totals,
)
from quantcalc.calculations.arithmetic import gcd, lcm
from quantcalc.calculations.construction import (
    ConcreteResult,
    PaintResult,
    concrete,
    paint,
)
from quantcalc.calculations.conversions import (
    CONVERSION_REGISTRY,
    Conversion,
    ConversionEntry,
    Quantity,
    available_conversions,
    available_units,
    convert,
    convert_area,
    convert_length,
    convert_speed,
    convert_temperature,
    convert_units,
    convert_volume,
    convert_weight,
)
from quantcalc.calculations.errors import (
    CalculationError,
    DivisionByZeroError,
    InvalidArgumentError,
    UnknownConversionError,
)
from quantcalc.calculations.finance import (
    CompoundInterestResult,
    TipResult,
    compound_interest,
    percentage,
    percentage_change,
    roi,
    tip_calculator,
)
from quantcalc.calculations.health import (
    ACTIVITY_MULTIPLIERS,
    BMIResult,
    IdealWeightResult,
    bmi,
    bmr,
    ideal_weight,
    tdee,
)

__all__ = [
    # Errors
    "CalculationError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "UnknownConversionError",
    # Amortization
    "LoanParameters",
    "LoanPaymentResult",
    "PaymentScheduleEntry",
    "amortization_schedule",
    "build_schedule",
    "loan_payment",
    "monthly_payment",
    "mortgage_payment",
    "remaining_balance",
    "schedule_totals",
    # Finance
    "CompoundInterestResult",
    "TipResult",
    "compound_interest",
    "percentage",
    "percentage_change",
    "roi",
    "tip_calculator",
    # Health
    "ACTIVITY_MULTIPLIERS",
    "BMIResult",
    "IdealWeightResult",
    "bmi",
    "bmr",
    "ideal_weight",
    "tdee",
    # Math
    "gcd",
    "lcm",
    # Conversions
    "CONVERSION_REGISTRY",
    "Conversion",
    "ConversionEntry",
    "Quantity",
    "available_conversions",
    "available_units",
    "convert",
    "convert_area",
    "convert_length",
    "convert_speed",
    "convert_temperature",
    "convert_units",
    "convert_volume",
    "convert_weight",
    # Construction
    "ConcreteResult",
    "PaintResult",
    "concrete",
    "paint",
]
