"""
Construction Estimates

Concrete volume and bag counts for a rectangular slab, and paint gallons for
a wall area. Bag and gallon counts round up to whole units.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict

from quantcalc.calculations.validation import (
    require_non_negative,
    require_positive,
    require_positive_int,
)

CUBIC_FEET_PER_YARD = 27
BAGS_60LB_PER_CUBIC_FOOT = 2.2
BAGS_80LB_PER_CUBIC_FOOT = 1.65

DEFAULT_COATS = 2
DEFAULT_COVERAGE_SQFT_PER_GALLON = 350


@dataclass(frozen=True)
class ConcreteResult:
    cubic_feet: float
    cubic_yards: float
    bags_60lb: int
    bags_80lb: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class PaintResult:
    gallons: int

    def to_dict(self) -> Dict:
        return asdict(self)


def concrete(length_ft: float, width_ft: float, depth_inches: float) -> ConcreteResult:
    """
    Estimate concrete for a slab.

    Args:
        length_ft: Slab length in feet
        width_ft: Slab width in feet
        depth_inches: Slab depth in inches

    Returns:
        ConcreteResult with volume and premix bag counts
    """
    require_non_negative(length_ft, "length_ft")
    require_non_negative(width_ft, "width_ft")
    require_non_negative(depth_inches, "depth_inches")

    cubic_feet = length_ft * width_ft * (depth_inches / 12)
    return ConcreteResult(
        cubic_feet=cubic_feet,
        cubic_yards=cubic_feet / CUBIC_FEET_PER_YARD,
        bags_60lb=math.ceil(cubic_feet * BAGS_60LB_PER_CUBIC_FOOT),
        bags_80lb=math.ceil(cubic_feet * BAGS_80LB_PER_CUBIC_FOOT),
    )


def paint(
    area_sqft: float,
    coats: int = DEFAULT_COATS,
    coverage_sqft_per_gallon: float = DEFAULT_COVERAGE_SQFT_PER_GALLON,
) -> PaintResult:
    """Gallons of paint needed, rounded up."""
    require_non_negative(area_sqft, "area_sqft")
    require_positive_int(coats, "coats")
    require_positive(coverage_sqft_per_gallon, "coverage_sqft_per_gallon")

    return PaintResult(gallons=math.ceil(area_sqft * coats / coverage_sqft_per_gallon))
