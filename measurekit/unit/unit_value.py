"""Measured values: a magnitude paired with a unit of one quantity kind.

This module provides the Value class, the generic container every quantity
kind shares. A Value keeps its magnitude exactly as given, in the paired
unit; nothing is normalized behind the scenes. Conversions and arithmetic
always produce new Value objects and leave the original untouched.

Key Features:
- Generic over one UnitOfMeasure subclass (Value[LengthUnit], ...)
- Conversion between units of the same kind
- Arithmetic and ordering between values of the same kind
- Parsing from a unit string or from the display form
- Human-readable "<magnitude> <abbr>" display

Classes:
    Value: Immutable magnitude/unit pair.

Example:
    >>> height = Value(10.0, LengthUnit.METERS)
    >>> print(height)  # "10.0 m"
    >>> print(height.convert(LengthUnit.FEET))  # "32.808398950131235 ft"
    >>> height.convert(MassUnit.KILOGRAMS)  # TypeError: different kinds
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Generic

from measurekit.config import ABS_TOLERANCE, BASE_TYPE, REL_TOLERANCE

from .unit_base import U, UnitOfMeasure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Value(Generic[U]):
    """Immutable magnitude expressed in a unit of a single quantity kind.

    Equality is structural: two values are equal when both magnitude and
    unit match. Use ``isclose`` to compare values expressed in different
    units.

    Ordering converts into the left operand's unit, so it is not consistent
    with equality: ``Value(1, km) <= Value(1000, m)`` and ``>=`` both hold
    while ``==`` does not.

    Attributes:
        value (float): Magnitude, expressed in ``unit``.
        unit (U): Unit the magnitude is expressed in.
    """

    __array_ufunc__ = None
    __array_priority__ = 1000

    value: float
    unit: U

    def __post_init__(self):
        if not isinstance(self.unit, UnitOfMeasure):
            msg = f"unit must be a UnitOfMeasure member, got {self.unit!r}"
            raise TypeError(msg)
        object.__setattr__(self, "value", float(self.value))

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_str(cls, value: BASE_TYPE, unit_text: str, kind: type[U]) -> Value[U] | None:
        """Create a value from a magnitude and unit text.

        Args:
            value: Magnitude expressed in the unit named by ``unit_text``.
            unit_text: Abbreviation, name, or "Name (abbr)" of a unit of ``kind``.
            kind: Quantity kind to look the unit up in.

        Returns:
            Value: The new value, or None if ``unit_text`` names no unit of ``kind``.
        """
        unit = kind.from_str(unit_text)
        if unit is None:
            return None
        return cls(value, unit)

    @classmethod
    def parse(cls, text: str, kind: type[U]) -> Value[U] | None:
        """Parse the display form "<magnitude> <unit text>".

        Args:
            text: Text such as "5.2 m" or "0 Degrees Celsius".
            kind: Quantity kind the unit text belongs to.

        Returns:
            Value: The parsed value, or None if either part is invalid.
        """
        if not isinstance(text, str):
            return None
        parts = text.strip().split(maxsplit=1)
        if len(parts) != 2:
            logger.debug(f"Cannot split {text!r} into magnitude and unit")
            return None
        magnitude, unit_text = parts
        try:
            number = float(magnitude)
        except ValueError:
            logger.debug(f"Invalid magnitude {magnitude!r} in {text!r}")
            return None
        return cls.from_str(number, unit_text, kind)

    # -------------------------------- Conversion --------------------------------
    def convert(self, to_unit: U) -> Value[U]:
        """Convert to another unit of the same kind.

        Args:
            to_unit: Target unit.

        Returns:
            Value: New value expressed in ``to_unit``.

        Raises:
            TypeError: If ``to_unit`` belongs to a different quantity kind.
        """
        return type(self)(self.unit.convert(self.value, to_unit), to_unit)

    def to(self, to_unit: U) -> float:
        """Return the magnitude expressed in another unit of the same kind."""
        return self.unit.convert(self.value, to_unit)

    def isclose(
        self,
        other: Value[U],
        rel_tol: float = REL_TOLERANCE,
        abs_tol: float = ABS_TOLERANCE,
    ) -> bool:
        """Check whether two values of the same kind are approximately equal.

        The other value is converted into this value's unit before comparing.

        Raises:
            TypeError: If ``other`` is not a Value or belongs to a different
                quantity kind.
        """
        if not isinstance(other, Value):
            msg = f"cannot compare Value with {type(other).__name__}"
            raise TypeError(msg)
        return math.isclose(
            self.value, other.to(self.unit), rel_tol=rel_tol, abs_tol=abs_tol
        )

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Value[U]) -> Value[U]:
        """Add a value of the same kind, keeping this value's unit.

        Raises:
            TypeError: If the values belong to different quantity kinds.
        """
        if not isinstance(other, Value):
            return NotImplemented
        return type(self)(self.value + other.to(self.unit), self.unit)

    def __sub__(self, other: Value[U]) -> Value[U]:
        """Subtract a value of the same kind, keeping this value's unit.

        Raises:
            TypeError: If the values belong to different quantity kinds.
        """
        if not isinstance(other, Value):
            return NotImplemented
        return type(self)(self.value - other.to(self.unit), self.unit)

    def __mul__(self, k: BASE_TYPE) -> Value[U]:
        if isinstance(k, BASE_TYPE) and not isinstance(k, bool):
            return type(self)(self.value * float(k), self.unit)
        return NotImplemented

    def __rmul__(self, k: BASE_TYPE) -> Value[U]:
        return self.__mul__(k)

    def __truediv__(self, k: BASE_TYPE) -> Value[U]:
        if isinstance(k, BASE_TYPE) and not isinstance(k, bool):
            return type(self)(self.value / float(k), self.unit)
        return NotImplemented

    def __neg__(self) -> Value[U]:
        return type(self)(-self.value, self.unit)

    def __abs__(self) -> Value[U]:
        return type(self)(abs(self.value), self.unit)

    # -------------------------------- Ordering --------------------------------
    def __lt__(self, other: Value[U]) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value < other.to(self.unit)

    def __le__(self, other: Value[U]) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value <= other.to(self.unit)

    def __gt__(self, other: Value[U]) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value > other.to(self.unit)

    def __ge__(self, other: Value[U]) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value >= other.to(self.unit)

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the magnitude followed by the unit abbreviation (e.g., "5.2 m")."""
        return f"{self.value} {self.unit.abbr}"

    def __repr__(self) -> str:
        return f"Value({self.value!r}, {type(self.unit).__name__}.{self.unit._name_})"
