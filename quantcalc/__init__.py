"""
QuantCalc: deterministic finance, health and unit-conversion calculators.
"""

__version__ = "0.1.0"
