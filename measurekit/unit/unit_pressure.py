"""Pressure unit definitions.

This module provides the PressureUnit quantity kind covering SI multiples,
engineering units and the atmospheric units. All conversions pass through
pascals (the SI base unit).

Classes:
    PressureUnit: Pascals (base), Kilopascals, Megapascals, Bars,
        Pounds per Square Inch, Atmospheres, Torrs.

Type Aliases:
    Pressure: Value expressed in a PressureUnit.

Example:
    >>> tire = Pressure(32.0, PressureUnit.POUNDS_PER_SQUARE_INCH)
    >>> tire.to(PressureUnit.KILOPASCALS)  # 220.63...
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value

STANDARD_ATMOSPHERE = 101_325.0  # Pa


class PressureUnit(UnitOfMeasure):
    """Units of pressure. The base unit is pascals."""

    PASCALS = auto()
    KILOPASCALS = auto()
    MEGAPASCALS = auto()
    BARS = auto()
    POUNDS_PER_SQUARE_INCH = auto()
    ATMOSPHERES = auto()
    TORRS = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _PRESSURE_TABLE


_PRESSURE_TABLE = unit_table(
    PressureUnit,
    {
        PressureUnit.PASCALS: UnitSpec("Pascals", "Pa", 1.0),
        PressureUnit.KILOPASCALS: UnitSpec("Kilopascals", "kPa", 1e3),
        PressureUnit.MEGAPASCALS: UnitSpec("Megapascals", "MPa", 1e6),
        PressureUnit.BARS: UnitSpec("Bars", "bar", 1e5),
        PressureUnit.POUNDS_PER_SQUARE_INCH: UnitSpec("Pounds per Square Inch", "psi", 6_894.757293168361),
        PressureUnit.ATMOSPHERES: UnitSpec("Atmospheres", "atm", STANDARD_ATMOSPHERE),
        PressureUnit.TORRS: UnitSpec("Torrs", "Torr", STANDARD_ATMOSPHERE / 760.0),
    },
)


Pressure = Value[PressureUnit]  # Type alias for a value in any pressure unit
