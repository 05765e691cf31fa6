"""Type-safe physical quantities and unit conversions.

measurekit represents measured values as a magnitude paired with a unit of
one quantity kind, and converts them between the units of that kind. Every
conversion is normalized through the kind's base unit, so conversions never
need pairwise rules and mixing kinds is rejected.

Package Components:
    measurekit.unit: UnitOfMeasure, Value and the quantity kinds
    measurekit.config: numeric types and default tolerances

Example:
    >>> from measurekit import Temperature, TemperatureUnit
    >>> Temperature(0.0, TemperatureUnit.CELSIUS).to(TemperatureUnit.KELVIN)
    273.15
"""

from measurekit.unit import (
    QUANTITY_KINDS,
    Acceleration,
    AccelerationUnit,
    Bearing,
    BearingUnit,
    Force,
    ForceUnit,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Pressure,
    PressureUnit,
    Temperature,
    TemperatureUnit,
    Time,
    TimeUnit,
    UnitOfMeasure,
    UnitSpec,
    Value,
    Velocity,
    VelocityUnit,
    print_unit_catalog,
    unit_catalog,
    unit_table,
)

__version__ = "0.1.0"

__all__ = [
    "UnitOfMeasure",
    "UnitSpec",
    "Value",
    "unit_table",
    "QUANTITY_KINDS",
    "LengthUnit",
    "MassUnit",
    "TimeUnit",
    "TemperatureUnit",
    "VelocityUnit",
    "ForceUnit",
    "PressureUnit",
    "BearingUnit",
    "AccelerationUnit",
    "Length",
    "Mass",
    "Time",
    "Temperature",
    "Velocity",
    "Force",
    "Pressure",
    "Bearing",
    "Acceleration",
    "unit_catalog",
    "print_unit_catalog",
]
