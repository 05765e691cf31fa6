"""Velocity unit definitions.

This module provides velocity and speed units commonly used in ground,
aviation and maritime applications. All velocity conversions pass through
meters per second (the SI base unit). "m/s" is a unit of its own here, not
a length divided by a time.

Classes:
    VelocityUnit: Meters per Second (base), Kilometers per Hour,
        Feet per Second, Miles per Hour, Knots.

Type Aliases:
    Velocity: Value expressed in a VelocityUnit.

Example:
    >>> cruise_speed = Velocity(50.0, VelocityUnit.KILOMETERS_PER_HOUR)
    >>> print(cruise_speed)  # "50.0 km/h"
    >>> cruise_speed.to(VelocityUnit.METERS_PER_SECOND)  # 13.888...
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value


class VelocityUnit(UnitOfMeasure):
    """Units of velocity. The base unit is meters per second."""

    METERS_PER_SECOND = auto()
    KILOMETERS_PER_HOUR = auto()
    FEET_PER_SECOND = auto()
    MILES_PER_HOUR = auto()
    KNOTS = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _VELOCITY_TABLE


_VELOCITY_TABLE = unit_table(
    VelocityUnit,
    {
        VelocityUnit.METERS_PER_SECOND: UnitSpec("Meters per Second", "m/s", 1.0),
        VelocityUnit.KILOMETERS_PER_HOUR: UnitSpec("Kilometers per Hour", "km/h", 1000.0 / 3600.0),
        VelocityUnit.FEET_PER_SECOND: UnitSpec("Feet per Second", "ft/s", 0.3048),
        VelocityUnit.MILES_PER_HOUR: UnitSpec("Miles per Hour", "mph", 0.44704),
        VelocityUnit.KNOTS: UnitSpec("Knots", "kn", 1852.0 / 3600.0),
    },
)


Velocity = Value[VelocityUnit]  # Type alias for a value in any velocity unit
