"""Force unit definitions.

All force conversions pass through newtons (the SI base unit).

Classes:
    ForceUnit: Newtons (base), Kilonewtons, Pounds Force, Kilograms Force.

Type Aliases:
    Force: Value expressed in a ForceUnit.
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value

STANDARD_GRAVITY = 9.80665  # m/s², exact by definition


class ForceUnit(UnitOfMeasure):
    """Units of force. The base unit is newtons."""

    NEWTONS = auto()
    KILONEWTONS = auto()
    POUNDS_FORCE = auto()
    KILOGRAMS_FORCE = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _FORCE_TABLE


_FORCE_TABLE = unit_table(
    ForceUnit,
    {
        ForceUnit.NEWTONS: UnitSpec("Newtons", "N", 1.0),
        ForceUnit.KILONEWTONS: UnitSpec("Kilonewtons", "kN", 1000.0),
        ForceUnit.POUNDS_FORCE: UnitSpec("Pounds Force", "lbf", 0.45359237 * STANDARD_GRAVITY),
        ForceUnit.KILOGRAMS_FORCE: UnitSpec("Kilograms Force", "kgf", STANDARD_GRAVITY),
    },
)


Force = Value[ForceUnit]  # Type alias for a value in any force unit
