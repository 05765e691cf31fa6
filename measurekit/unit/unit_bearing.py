"""Angular unit definitions for bearings and headings.

This module provides angular units used for navigation headings, bearings
and orientation. All angles convert through radians (the SI unit), while
supporting input and display in degrees, gradians and NATO mils.

No wrapping is applied: 450 degrees stays 450 degrees after conversion.

Classes:
    BearingUnit: Radians (base), Degrees, Gradians, Mils.

Type Aliases:
    Bearing: Value expressed in a BearingUnit.

Example:
    >>> heading = Bearing(90.0, BearingUnit.DEGREES)  # due east
    >>> heading.to(BearingUnit.RADIANS)  # 1.5707963267948966
    >>> heading.to(BearingUnit.MILS)  # 1600.0
"""

from __future__ import annotations

from enum import auto
from math import pi

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value


class BearingUnit(UnitOfMeasure):
    """Units of plane angle. The base unit is radians."""

    RADIANS = auto()
    DEGREES = auto()
    GRADIANS = auto()
    MILS = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _BEARING_TABLE


_BEARING_TABLE = unit_table(
    BearingUnit,
    {
        BearingUnit.RADIANS: UnitSpec("Radians", "rad", 1.0),
        BearingUnit.DEGREES: UnitSpec("Degrees", "°", pi / 180),
        BearingUnit.GRADIANS: UnitSpec("Gradians", "gon", pi / 200),
        BearingUnit.MILS: UnitSpec("Mils", "mil", pi / 3200),  # 6400 per turn
    },
)


Bearing = Value[BearingUnit]  # Type alias for a value in any angular unit
