"""Temperature unit definitions.

Temperature is the affine quantity kind: Celsius and Fahrenheit do not share
a zero point with Kelvin, so their table rows carry an offset besides the
scale. A magnitude in any unit maps to Kelvin as ``value * scale + offset``.

Classes:
    TemperatureUnit: Kelvin (base), Celsius, Fahrenheit, Rankine.

Type Aliases:
    Temperature: Value expressed in a TemperatureUnit.

Example:
    >>> freezing = Temperature(0.0, TemperatureUnit.CELSIUS)
    >>> freezing.to(TemperatureUnit.KELVIN)  # 273.15
    >>> freezing.to(TemperatureUnit.FAHRENHEIT)  # 32.0 (within rounding)
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value

KELVIN_PER_RANKINE = 5.0 / 9.0
CELSIUS_ZERO_KELVIN = 273.15
FAHRENHEIT_ZERO_RANKINE = 459.67


class TemperatureUnit(UnitOfMeasure):
    """Units of thermodynamic temperature. The base unit is Kelvin."""

    KELVIN = auto()
    CELSIUS = auto()
    FAHRENHEIT = auto()
    RANKINE = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _TEMPERATURE_TABLE


_TEMPERATURE_TABLE = unit_table(
    TemperatureUnit,
    {
        TemperatureUnit.KELVIN: UnitSpec("Kelvin", "K", 1.0),
        TemperatureUnit.CELSIUS: UnitSpec("Celsius", "°C", 1.0, CELSIUS_ZERO_KELVIN),
        TemperatureUnit.FAHRENHEIT: UnitSpec(
            "Fahrenheit",
            "°F",
            KELVIN_PER_RANKINE,
            FAHRENHEIT_ZERO_RANKINE * KELVIN_PER_RANKINE,
        ),
        TemperatureUnit.RANKINE: UnitSpec("Rankine", "°R", KELVIN_PER_RANKINE),
    },
)


Temperature = Value[TemperatureUnit]  # Type alias for a value in any temperature unit
