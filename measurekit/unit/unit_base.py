"""Base unit-of-measure foundation for type-safe physical quantities.

This module provides the UnitOfMeasure enumeration base that every quantity
kind (length, mass, temperature, ...) derives from. A quantity kind is one
Enum subclass; its members are the interchangeable units of that kind and
each member is described by a single row of a static unit table.

Conversions always pass through the kind's base unit. A value is first
normalized (``base = value * scale + offset``) and then denormalized into the
target unit (``(base - offset) / scale``), so adding a unit to a kind is a
one-row edit instead of a new pairwise rule.

Key Concepts:
- Quantity Kind: one UnitOfMeasure subclass, e.g. LengthUnit
- Unit Table: immutable mapping of member -> UnitSpec, built by unit_table()
- Base Unit: the single row with scale 1 and offset 0
- Type Safety: operations between units of different kinds raise TypeError

Classes:
    UnitSpec: One row of a unit table (name, abbreviation, scale, offset).
    UnitOfMeasure: Enum base class implementing the shared capability.

Functions:
    unit_table: Build and validate the table for a quantity kind.

Example:
    >>> class LengthUnit(UnitOfMeasure):
    ...     METERS = auto()
    ...     FEET = auto()
    ...
    ...     @classmethod
    ...     def _table(cls):
    ...         return _LENGTH_TABLE
    >>> _LENGTH_TABLE = unit_table(LengthUnit, {
    ...     LengthUnit.METERS: UnitSpec("Meters", "m", 1.0),
    ...     LengthUnit.FEET: UnitSpec("Feet", "ft", 0.3048),
    ... })
    >>> LengthUnit.METERS.convert(10.0, LengthUnit.FEET)
    32.808398950131235
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from math import isfinite
from types import MappingProxyType
from typing import NamedTuple, Self, TypeVar

import numpy as np

from measurekit.config import ARRAY_TYPE, BASE_TYPE

logger = logging.getLogger(__name__)


class UnitSpec(NamedTuple):
    """One row of a quantity kind's unit table.

    Attributes:
        name (str): Display name, e.g. "Meters".
        abbr (str): Abbreviation, e.g. "m".
        scale (float): Multiplier taking a magnitude in this unit to the base unit.
        offset (float): Addend applied after scaling; non-zero only for affine units.
    """

    name: str
    abbr: str
    scale: float
    offset: float = 0.0

    @property
    def is_base(self) -> bool:
        return self.scale == 1.0 and self.offset == 0.0


UnitTable = Mapping["UnitOfMeasure", UnitSpec]
U = TypeVar("U", bound="UnitOfMeasure")


def normalize_unit_text(text: str) -> str:
    """Normalize unit text for matching: trimmed, single-spaced, casefolded."""
    return " ".join(text.split()).casefold()


class UnitOfMeasure(Enum):
    """Base class for every quantity kind's enumeration of units.

    Subclasses declare their members (usually with ``auto()``) and implement
    ``_table()`` to return the table built by ``unit_table``. Everything else
    (text, conversion, enumeration and parsing) is derived from that table.

    The ``name`` property is overridden to return the unit's display name;
    the Python identifier of a member is still available as ``_name_``.
    """

    @classmethod
    def _table(cls) -> UnitTable:
        """Return the unit table of this quantity kind.

        Raises:
            NotImplementedError: If the subclass does not provide a table.
        """
        raise NotImplementedError(f"{cls.__name__} does not define a unit table")

    @property
    def spec(self) -> UnitSpec:
        return type(self)._table()[self]

    @property
    def name(self) -> str:
        """Display name of the unit, e.g. "Meters"."""
        return self.spec.name

    @property
    def abbr(self) -> str:
        """Abbreviation of the unit, e.g. "m"."""
        return self.spec.abbr

    @property
    def name_and_abbr(self) -> str:
        """Name with abbreviation, e.g. "Meters (m)"."""
        return f"{self.name} ({self.abbr})"

    @property
    def scale(self) -> float:
        return self.spec.scale

    @property
    def offset(self) -> float:
        return self.spec.offset

    @property
    def is_base(self) -> bool:
        return self.spec.is_base

    def __str__(self) -> str:
        return self.name_and_abbr

    def _check_same_kind(self, other: UnitOfMeasure) -> None:
        """Check that another unit belongs to the same quantity kind.

        Args:
            other: The unit to check compatibility with.

        Raises:
            TypeError: If the units belong to different quantity kinds.
        """
        if type(other) is not type(self):
            msg = (
                f"cannot convert {type(self).__name__} to "
                f"{type(other).__name__}: units of different quantity kinds"
            )
            raise TypeError(msg)

    # -------------------------------- Conversion --------------------------------
    def to_base(self, value: BASE_TYPE) -> float:
        """Express a magnitude given in this unit in the kind's base unit."""
        return float(value) * self.scale + self.offset

    def from_base(self, value: BASE_TYPE) -> float:
        """Express a magnitude given in the kind's base unit in this unit."""
        return (float(value) - self.offset) / self.scale

    def convert(self, value: BASE_TYPE, to_unit: Self) -> float:
        """Convert a magnitude from this unit to another unit of the same kind.

        The magnitude is normalized to the base unit and then denormalized to
        the target. Converting to the same unit returns the magnitude as is.

        Args:
            value: Magnitude expressed in this unit.
            to_unit: Target unit of the same quantity kind.

        Returns:
            float: Magnitude expressed in ``to_unit``.

        Raises:
            TypeError: If ``to_unit`` belongs to a different quantity kind.
        """
        self._check_same_kind(to_unit)
        if to_unit is self:
            return float(value)
        return to_unit.from_base(self.to_base(value))

    def convert_array(self, values, to_unit: Self) -> ARRAY_TYPE:
        """Convert many magnitudes at once.

        Args:
            values: Array-like of magnitudes expressed in this unit.
            to_unit: Target unit of the same quantity kind.

        Returns:
            numpy.ndarray: Float array of magnitudes expressed in ``to_unit``.

        Raises:
            TypeError: If ``to_unit`` belongs to a different quantity kind.
        """
        self._check_same_kind(to_unit)
        arr = np.array(values, dtype=float)
        if to_unit is self:
            return arr
        base = arr * self.scale + self.offset
        return (base - to_unit.offset) / to_unit.scale

    # -------------------------------- Introspection --------------------------------
    @classmethod
    def all_names(cls) -> list[str]:
        return [unit.name for unit in cls]

    @classmethod
    def all_abbrs(cls) -> list[str]:
        return [unit.abbr for unit in cls]

    @classmethod
    def all_names_and_abbrs(cls) -> list[str]:
        return [unit.name_and_abbr for unit in cls]

    @classmethod
    def default(cls) -> Self:
        """Return the base unit of this quantity kind.

        Raises:
            LookupError: If no unit of the kind is a base unit.
        """
        for unit in cls:
            if unit.is_base:
                return unit
        raise LookupError(f"{cls.__name__} has no base unit")

    @classmethod
    def from_str(cls, text: str) -> Self | None:
        """Find the unit matching an abbreviation, name, or name with abbreviation.

        Abbreviations are tried first, then names, then the "Name (abbr)"
        form. Matching ignores case and surrounding whitespace, and runs of
        inner whitespace count as one space.

        Args:
            text: Unit text such as "m", "Meters" or "Meters (m)".

        Returns:
            The matching unit, or None when no unit of this kind matches.
        """
        if not isinstance(text, str):
            return None
        key = normalize_unit_text(text)
        for attr in ("abbr", "name", "name_and_abbr"):
            for unit in cls:
                if normalize_unit_text(getattr(unit, attr)) == key:
                    return unit
        logger.debug(f"No {cls.__name__} matches {text!r}")
        return None


def _parse_keys(spec: UnitSpec) -> set[str]:
    return {
        normalize_unit_text(spec.abbr),
        normalize_unit_text(spec.name),
        normalize_unit_text(f"{spec.name} ({spec.abbr})"),
    }


def unit_table(kind: type[U], rows: Mapping[U, UnitSpec]) -> UnitTable:
    """Build the read-only unit table of a quantity kind.

    The table must cover every member of ``kind`` exactly once, contain one
    base unit, use finite non-zero scales and finite offsets, and give every
    member parse keys no other member shares.

    Args:
        kind: The UnitOfMeasure subclass the table describes.
        rows: Mapping of each member to its UnitSpec, in any order.

    Returns:
        Mapping: Immutable view of the table.

    Raises:
        ValueError: If the table violates any of the rules above.
    """

    def fail(msg: str) -> None:
        logger.error(f"Invalid unit table for {kind.__name__}: {msg}")
        raise ValueError(f"{kind.__name__}: {msg}")

    foreign = [key for key in rows if not isinstance(key, kind)]
    if foreign:
        fail(f"rows for units of another kind: {foreign}")
    missing = [unit._name_ for unit in kind if unit not in rows]
    if missing:
        fail(f"no table row for {', '.join(missing)}")

    bases = [unit._name_ for unit in kind if rows[unit].is_base]
    if len(bases) != 1:
        fail(f"expected exactly one base unit, found {bases}")

    seen: dict[str, str] = {}
    for unit in kind:
        spec = rows[unit]
        if not isfinite(spec.scale) or spec.scale == 0.0:
            fail(f"{unit._name_} has invalid scale {spec.scale!r}")
        if not isfinite(spec.offset):
            fail(f"{unit._name_} has invalid offset {spec.offset!r}")
        for key in _parse_keys(spec):
            owner = seen.setdefault(key, unit._name_)
            if owner != unit._name_:
                fail(f"{unit._name_} and {owner} both match {key!r}")

    return MappingProxyType({unit: rows[unit] for unit in kind})
