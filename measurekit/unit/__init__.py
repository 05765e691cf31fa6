"""Unit-of-measure system for type-safe physical quantities.

This package provides the two capabilities every quantity kind is built
from, and the quantity kinds themselves.

Architecture:
    - unit_base: UnitOfMeasure enum base, UnitSpec rows, unit_table builder
    - unit_value: Value, the generic magnitude/unit pair
    - unit_<kind>: one module per quantity kind
    - kinds: QUANTITY_KINDS, every shipped kind in catalog order
    - catalog: rich help-text tables of the available units

Quantity Kinds (base unit first):
    - LengthUnit: Meters, Millimeters, ..., Nautical Miles
    - MassUnit: Kilograms, Grams, Metric Tons, Ounces, Pounds
    - TimeUnit: Seconds, Minutes, Hours, Days, Weeks, Years
    - TemperatureUnit: Kelvin, Celsius, Fahrenheit, Rankine
    - VelocityUnit: Meters per Second, km/h, ft/s, mph, Knots
    - ForceUnit: Newtons, Kilonewtons, Pounds Force, Kilograms Force
    - PressureUnit: Pascals, kPa, MPa, Bars, psi, Atmospheres, Torrs
    - BearingUnit: Radians, Degrees, Gradians, Mils
    - AccelerationUnit: m/s², ft/s², Standard Gravities

Example:
    >>> from measurekit.unit import Length, LengthUnit
    >>> d = Length(10.0, LengthUnit.METERS)
    >>> print(d.convert(LengthUnit.FEET))  # "32.808398950131235 ft"
    >>> LengthUnit.from_str("Nautical Miles (nmi)")  # LengthUnit.NAUTICAL_MILES
    >>> LengthUnit.from_str("parsec")  # None
"""

from .catalog import print_unit_catalog, unit_catalog
from .kinds import QUANTITY_KINDS
from .unit_acceleration import Acceleration, AccelerationUnit
from .unit_base import UnitOfMeasure, UnitSpec, unit_table
from .unit_bearing import Bearing, BearingUnit
from .unit_force import Force, ForceUnit
from .unit_length import Length, LengthUnit
from .unit_mass import Mass, MassUnit
from .unit_pressure import Pressure, PressureUnit
from .unit_temperature import Temperature, TemperatureUnit
from .unit_time import Time, TimeUnit
from .unit_value import Value
from .unit_velocity import Velocity, VelocityUnit

__all__ = [
    # Capabilities
    "UnitOfMeasure",
    "UnitSpec",
    "Value",
    "unit_table",
    "QUANTITY_KINDS",
    # Quantity kinds
    "LengthUnit",
    "MassUnit",
    "TimeUnit",
    "TemperatureUnit",
    "VelocityUnit",
    "ForceUnit",
    "PressureUnit",
    "BearingUnit",
    "AccelerationUnit",
    # Value aliases
    "Length",
    "Mass",
    "Time",
    "Temperature",
    "Velocity",
    "Force",
    "Pressure",
    "Bearing",
    "Acceleration",
    # Help text
    "unit_catalog",
    "print_unit_catalog",
]
