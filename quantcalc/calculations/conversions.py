"""
Unit Conversions

Two lookups, both built once at import and read-only afterwards:

1. Named one-way conversions (``kmToMiles``, ``celsiusToKelvin``, ...). Each
   name is a member of the ``Conversion`` enum and dispatches to a scalar
   factor or a function. ``kmToMiles`` and ``milesToKm`` are separate entries;
   round trips are exact only up to floating-point error.

2. Dimensioned conversion between any two units of one quantity through a
   base unit per quantity:

       to_value = (value - offset_from) * scale_from / scale_to + offset_to

   Only temperature units carry a non-zero offset.

No rounding is applied here.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Union

from quantcalc.calculations.errors import UnknownConversionError
from quantcalc.calculations.validation import require_finite

logger = logging.getLogger(__name__)


class Quantity(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"
    SPEED = "speed"
    AREA = "area"


class Conversion(str, Enum):
    """Named conversions; the value is the public conversion name."""

    KM_TO_MILES = "kmToMiles"
    MILES_TO_KM = "milesToKm"
    CM_TO_INCHES = "cmToInches"
    INCHES_TO_CM = "inchesToCm"
    FEET_TO_METERS = "feetToMeters"
    METERS_TO_FEET = "metersToFeet"

    KG_TO_LBS = "kgToLbs"
    LBS_TO_KG = "lbsToKg"
    OZ_TO_GRAMS = "ozToGrams"
    GRAMS_TO_OZ = "gramsToOz"

    CELSIUS_TO_FAHRENHEIT = "celsiusToFahrenheit"
    FAHRENHEIT_TO_CELSIUS = "fahrenheitToCelsius"
    CELSIUS_TO_KELVIN = "celsiusToKelvin"
    KELVIN_TO_CELSIUS = "kelvinToCelsius"

    LITERS_TO_GALLONS = "litersToGallons"
    GALLONS_TO_LITERS = "gallonsToLiters"
    ML_TO_FL_OZ = "mlToFlOz"
    FL_OZ_TO_ML = "flOzToMl"

    KPH_TO_MPH = "kphToMph"
    MPH_TO_KPH = "mphToKph"

    SQFT_TO_SQM = "sqftToSqm"
    SQM_TO_SQFT = "sqmToSqft"
    ACRES_TO_HECTARES = "acresToHectares"
    HECTARES_TO_ACRES = "hectaresToAcres"


Factor = Union[float, Callable[[float], float]]


@dataclass(frozen=True)
class ConversionEntry:
    """A single-direction conversion: a multiplier or a pure function."""

    name: str
    quantity: Quantity
    source: str
    target: str
    factor_or_fn: Factor

    def apply(self, value: float) -> float:
        if callable(self.factor_or_fn):
            return self.factor_or_fn(value)
        return value * self.factor_or_fn


def _entry(
    conversion: Conversion, quantity: Quantity, source: str, target: str, factor: Factor
):
    return conversion, ConversionEntry(conversion.value, quantity, source, target, factor)


_Q = Quantity
_C = Conversion

CONVERSION_REGISTRY: Mapping[Conversion, ConversionEntry] = MappingProxyType(
    dict(
        (
            _entry(_C.KM_TO_MILES, _Q.LENGTH, "km", "mi", 0.621371),
            _entry(_C.MILES_TO_KM, _Q.LENGTH, "mi", "km", 1.60934),
            _entry(_C.CM_TO_INCHES, _Q.LENGTH, "cm", "in", 0.393701),
            _entry(_C.INCHES_TO_CM, _Q.LENGTH, "in", "cm", 2.54),
            _entry(_C.FEET_TO_METERS, _Q.LENGTH, "ft", "m", 0.3048),
            _entry(_C.METERS_TO_FEET, _Q.LENGTH, "m", "ft", 3.28084),
            _entry(_C.KG_TO_LBS, _Q.WEIGHT, "kg", "lb", 2.20462),
            _entry(_C.LBS_TO_KG, _Q.WEIGHT, "lb", "kg", 0.453592),
            _entry(_C.OZ_TO_GRAMS, _Q.WEIGHT, "oz", "g", 28.3495),
            _entry(_C.GRAMS_TO_OZ, _Q.WEIGHT, "g", "oz", 0.035274),
            _entry(_C.CELSIUS_TO_FAHRENHEIT, _Q.TEMPERATURE, "c", "f", lambda v: v * 9 / 5 + 32),
            _entry(_C.FAHRENHEIT_TO_CELSIUS, _Q.TEMPERATURE, "f", "c", lambda v: (v - 32) * 5 / 9),
            _entry(_C.CELSIUS_TO_KELVIN, _Q.TEMPERATURE, "c", "k", lambda v: v + 273.15),
            _entry(_C.KELVIN_TO_CELSIUS, _Q.TEMPERATURE, "k", "c", lambda v: v - 273.15),
            _entry(_C.LITERS_TO_GALLONS, _Q.VOLUME, "l", "gal", 0.264172),
            _entry(_C.GALLONS_TO_LITERS, _Q.VOLUME, "gal", "l", 3.78541),
            _entry(_C.ML_TO_FL_OZ, _Q.VOLUME, "ml", "floz", 0.033814),
            _entry(_C.FL_OZ_TO_ML, _Q.VOLUME, "floz", "ml", lambda v: v / 0.033814),
            _entry(_C.KPH_TO_MPH, _Q.SPEED, "kph", "mph", 0.621371),
            _entry(_C.MPH_TO_KPH, _Q.SPEED, "mph", "kph", 1.60934),
            _entry(_C.SQFT_TO_SQM, _Q.AREA, "sqft", "sqm", 0.092903),
            _entry(_C.SQM_TO_SQFT, _Q.AREA, "sqm", "sqft", lambda v: v / 0.092903),
            _entry(_C.ACRES_TO_HECTARES, _Q.AREA, "acre", "hectare", 0.404686),
            _entry(_C.HECTARES_TO_ACRES, _Q.AREA, "hectare", "acre", lambda v: v / 0.404686),
        )
    )
)


def available_conversions(quantity: Optional[Union[str, Quantity]] = None) -> List[str]:
    """Registered conversion names, optionally limited to one quantity."""
    if quantity is None:
        return sorted(c.value for c in CONVERSION_REGISTRY)
    resolved = _resolve_quantity(quantity)
    return sorted(
        c.value for c, entry in CONVERSION_REGISTRY.items() if entry.quantity is resolved
    )


def get_conversion(conversion: Union[str, Conversion]) -> ConversionEntry:
    """Resolve a conversion name or enum member to its registry entry."""
    try:
        key = Conversion(conversion)
    except ValueError:
        raise UnknownConversionError(
            str(conversion), available_conversions()
        ) from None
    return CONVERSION_REGISTRY[key]


def convert(value: float, conversion: Union[str, Conversion]) -> float:
    """
    Apply a named one-way conversion.

    Args:
        value: Value to convert
        conversion: Conversion name (e.g., "kmToMiles") or Conversion member

    Returns:
        Converted value, unrounded

    Raises:
        UnknownConversionError: name not registered; ``available`` lists valid names
    """
    entry = get_conversion(conversion)
    require_finite(value, "value")
    return entry.apply(value)


# =============================================================================
# DIMENSIONED CONVERSION
# =============================================================================


@dataclass(frozen=True)
class UnitScale:
    """How one unit maps to its quantity's base unit: base = (v - offset) * scale."""

    scale: float
    offset: float = 0.0


# Base units: meter, gram, Celsius, liter, meter/second, square meter
_UNIT_TABLES: Dict[Quantity, Dict[str, UnitScale]] = {
    Quantity.LENGTH: {
        "m": UnitScale(1.0),
        "km": UnitScale(1000.0),
        "cm": UnitScale(0.01),
        "mm": UnitScale(0.001),
        "mi": UnitScale(1609.344),
        "yd": UnitScale(0.9144),
        "ft": UnitScale(0.3048),
        "in": UnitScale(0.0254),
    },
    Quantity.WEIGHT: {
        "g": UnitScale(1.0),
        "kg": UnitScale(1000.0),
        "mg": UnitScale(0.001),
        "t": UnitScale(1_000_000.0),
        "lb": UnitScale(453.59237),
        "oz": UnitScale(28.349523125),
        "st": UnitScale(6350.29318),
    },
    Quantity.TEMPERATURE: {
        "c": UnitScale(1.0),
        "f": UnitScale(5 / 9, 32.0),
        "k": UnitScale(1.0, 273.15),
    },
    Quantity.VOLUME: {
        "l": UnitScale(1.0),
        "ml": UnitScale(0.001),
        "m3": UnitScale(1000.0),
        "gal": UnitScale(3.785411784),
        "qt": UnitScale(0.946352946),
        "pt": UnitScale(0.473176473),
        "cup": UnitScale(0.2365882365),
        "floz": UnitScale(0.0295735295625),
    },
    Quantity.SPEED: {
        "mps": UnitScale(1.0),
        "kph": UnitScale(1000 / 3600),
        "mph": UnitScale(0.44704),
        "knot": UnitScale(1852 / 3600),
        "fps": UnitScale(0.3048),
    },
    Quantity.AREA: {
        "sqm": UnitScale(1.0),
        "sqkm": UnitScale(1_000_000.0),
        "sqft": UnitScale(0.09290304),
        "sqin": UnitScale(0.00064516),
        "sqyd": UnitScale(0.83612736),
        "acre": UnitScale(4046.8564224),
        "hectare": UnitScale(10_000.0),
    },
}

_UNIT_ALIASES: Dict[Quantity, Dict[str, str]] = {
    Quantity.LENGTH: {
        "meter": "m", "meters": "m", "metre": "m", "metres": "m",
        "kilometer": "km", "kilometers": "km",
        "centimeter": "cm", "centimeters": "cm",
        "millimeter": "mm", "millimeters": "mm",
        "mile": "mi", "miles": "mi",
        "yard": "yd", "yards": "yd",
        "foot": "ft", "feet": "ft",
        "inch": "in", "inches": "in",
    },
    Quantity.WEIGHT: {
        "gram": "g", "grams": "g",
        "kilogram": "kg", "kilograms": "kg",
        "milligram": "mg", "milligrams": "mg",
        "tonne": "t", "tonnes": "t",
        "lbs": "lb", "pound": "lb", "pounds": "lb",
        "ounce": "oz", "ounces": "oz",
        "stone": "st",
    },
    Quantity.TEMPERATURE: {
        "celsius": "c", "fahrenheit": "f", "kelvin": "k",
    },
    Quantity.VOLUME: {
        "liter": "l", "liters": "l", "litre": "l", "litres": "l",
        "milliliter": "ml", "milliliters": "ml",
        "gallon": "gal", "gallons": "gal",
        "quart": "qt", "quarts": "qt",
        "pint": "pt", "pints": "pt",
        "cups": "cup",
        "fl_oz": "floz",
    },
    Quantity.SPEED: {
        "m/s": "mps", "kmh": "kph", "km/h": "kph", "knots": "knot", "ft/s": "fps",
    },
    Quantity.AREA: {
        "m2": "sqm", "km2": "sqkm", "ft2": "sqft", "in2": "sqin", "yd2": "sqyd",
        "acres": "acre", "ha": "hectare", "hectares": "hectare",
    },
}

UNIT_TABLES: Mapping[Quantity, Mapping[str, UnitScale]] = MappingProxyType(
    {quantity: MappingProxyType(table) for quantity, table in _UNIT_TABLES.items()}
)


def _resolve_quantity(quantity: Union[str, Quantity]) -> Quantity:
    if isinstance(quantity, Quantity):
        return quantity
    try:
        return Quantity(str(quantity).strip().lower())
    except ValueError:
        raise UnknownConversionError(
            str(quantity), [q.value for q in Quantity], kind="quantity"
        ) from None


def available_units(quantity: Union[str, Quantity]) -> List[str]:
    """Canonical unit tokens for a quantity."""
    return sorted(UNIT_TABLES[_resolve_quantity(quantity)])


def _resolve_unit(token: str, quantity: Quantity) -> UnitScale:
    table = UNIT_TABLES[quantity]
    key = str(token).strip().lower()
    key = _UNIT_ALIASES[quantity].get(key, key)
    if key not in table:
        raise UnknownConversionError(
            str(token), list(table), kind=f"{quantity.value} unit"
        )
    return table[key]


def convert_units(
    value: float,
    from_unit: str,
    to_unit: str,
    quantity: Union[str, Quantity],
) -> float:
    """
    Convert between two units of the same quantity via its base unit.

    Raises:
        UnknownConversionError: unknown quantity or unit token
    """
    resolved = _resolve_quantity(quantity)
    source = _resolve_unit(from_unit, resolved)
    target = _resolve_unit(to_unit, resolved)
    require_finite(value, "value")

    return (value - source.offset) * source.scale / target.scale + target.offset


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.LENGTH)


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.WEIGHT)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.TEMPERATURE)


def convert_volume(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.VOLUME)


def convert_speed(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.SPEED)


def convert_area(value: float, from_unit: str, to_unit: str) -> float:
    return convert_units(value, from_unit, to_unit, Quantity.AREA)


logger.debug(
    "Conversion registry loaded: %d named conversions, %d quantities",
    len(CONVERSION_REGISTRY),
    len(UNIT_TABLES),
)
