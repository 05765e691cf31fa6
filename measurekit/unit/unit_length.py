"""Length unit definitions for spatial measurements.

This module provides the LengthUnit quantity kind. All length conversions
pass through meters (the SI base unit), while values can be created and
displayed in any metric, imperial or nautical unit listed below.

Classes:
    LengthUnit: Millimeters, Centimeters, Meters (base), Kilometers, Inches,
        Feet, Yards, Statute Miles, Nautical Miles.

Type Aliases:
    Length: Value expressed in a LengthUnit.

Example:
    >>> altitude = Length(120.0, LengthUnit.METERS)
    >>> print(altitude)  # "120.0 m"
    >>> print(altitude.convert(LengthUnit.FEET))  # "393.7007874015748 ft"
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value


class LengthUnit(UnitOfMeasure):
    """Units of length. The base unit is meters."""

    MILLIMETERS = auto()
    CENTIMETERS = auto()
    METERS = auto()
    KILOMETERS = auto()
    INCHES = auto()
    FEET = auto()
    YARDS = auto()
    STATUTE_MILES = auto()
    NAUTICAL_MILES = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _LENGTH_TABLE


_LENGTH_TABLE = unit_table(
    LengthUnit,
    {
        LengthUnit.MILLIMETERS: UnitSpec("Millimeters", "mm", 0.001),
        LengthUnit.CENTIMETERS: UnitSpec("Centimeters", "cm", 0.01),
        LengthUnit.METERS: UnitSpec("Meters", "m", 1.0),
        LengthUnit.KILOMETERS: UnitSpec("Kilometers", "km", 1000.0),
        LengthUnit.INCHES: UnitSpec("Inches", "in", 0.0254),
        LengthUnit.FEET: UnitSpec("Feet", "ft", 0.3048),
        LengthUnit.YARDS: UnitSpec("Yards", "yd", 0.9144),
        LengthUnit.STATUTE_MILES: UnitSpec("Statute Miles", "mi", 1609.344),
        LengthUnit.NAUTICAL_MILES: UnitSpec("Nautical Miles", "nmi", 1852.0),
    },
)


Length = Value[LengthUnit]  # Type alias for a value in any length unit
