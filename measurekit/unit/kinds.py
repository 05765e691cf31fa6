"""The quantity kinds shipped with measurekit, in catalog order."""

from __future__ import annotations

from .unit_acceleration import AccelerationUnit
from .unit_base import UnitOfMeasure
from .unit_bearing import BearingUnit
from .unit_force import ForceUnit
from .unit_length import LengthUnit
from .unit_mass import MassUnit
from .unit_pressure import PressureUnit
from .unit_temperature import TemperatureUnit
from .unit_time import TimeUnit
from .unit_velocity import VelocityUnit

QUANTITY_KINDS: tuple[type[UnitOfMeasure], ...] = (
    LengthUnit,
    MassUnit,
    TimeUnit,
    TemperatureUnit,
    VelocityUnit,
    ForceUnit,
    PressureUnit,
    BearingUnit,
    AccelerationUnit,
)
