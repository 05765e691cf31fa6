"""Mass unit definitions.

All mass conversions pass through kilograms (the SI base unit).

Classes:
    MassUnit: Grams, Kilograms (base), Metric Tons, Ounces, Pounds.

Type Aliases:
    Mass: Value expressed in a MassUnit.
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value


class MassUnit(UnitOfMeasure):
    """Units of mass. The base unit is kilograms."""

    GRAMS = auto()
    KILOGRAMS = auto()
    METRIC_TONS = auto()
    OUNCES = auto()
    POUNDS = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _MASS_TABLE


_MASS_TABLE = unit_table(
    MassUnit,
    {
        MassUnit.GRAMS: UnitSpec("Grams", "g", 0.001),
        MassUnit.KILOGRAMS: UnitSpec("Kilograms", "kg", 1.0),
        MassUnit.METRIC_TONS: UnitSpec("Metric Tons", "t", 1000.0),
        MassUnit.OUNCES: UnitSpec("Ounces", "oz", 0.028349523125),
        MassUnit.POUNDS: UnitSpec("Pounds", "lb", 0.45359237),
    },
)


Mass = Value[MassUnit]  # Type alias for a value in any mass unit
