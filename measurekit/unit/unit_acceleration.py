"""Acceleration unit definitions.

All conversions pass through meters per second squared (the SI unit).

Classes:
    AccelerationUnit: Meters per Second Squared (base),
        Feet per Second Squared, Standard Gravities.

Type Aliases:
    Acceleration: Value expressed in an AccelerationUnit.
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_force import STANDARD_GRAVITY
from .unit_value import Value


class AccelerationUnit(UnitOfMeasure):
    """Units of acceleration. The base unit is meters per second squared."""

    METERS_PER_SECOND_SQUARED = auto()
    FEET_PER_SECOND_SQUARED = auto()
    STANDARD_GRAVITIES = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _ACCELERATION_TABLE


_ACCELERATION_TABLE = unit_table(
    AccelerationUnit,
    {
        AccelerationUnit.METERS_PER_SECOND_SQUARED: UnitSpec("Meters per Second Squared", "m/s²", 1.0),
        AccelerationUnit.FEET_PER_SECOND_SQUARED: UnitSpec("Feet per Second Squared", "ft/s²", 0.3048),
        AccelerationUnit.STANDARD_GRAVITIES: UnitSpec("Standard Gravities", "g", STANDARD_GRAVITY),
    },
)


Acceleration = Value[AccelerationUnit]  # Type alias for a value in any acceleration unit
