"""Help-text rendering of the available units.

This module turns the unit tables of one or more quantity kinds into rich
tables, for listing the units a caller may type in help screens and
interactive sessions.

Functions:
    unit_catalog: Build the rich Table describing one quantity kind.
    print_unit_catalog: Print the tables of several kinds to a console.

Example:
    >>> from measurekit.unit import LengthUnit, print_unit_catalog
    >>> print_unit_catalog(LengthUnit)
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .kinds import QUANTITY_KINDS
from .unit_base import UnitOfMeasure


def unit_catalog(kind: type[UnitOfMeasure]) -> Table:
    """Build a table with one row per unit of a quantity kind.

    Rows follow the kind's declaration order, so row ``i`` matches
    ``kind.all_names()[i]`` and ``kind.all_abbrs()[i]``.

    Args:
        kind: The UnitOfMeasure subclass to describe.

    Returns:
        Table: Columns Name, Abbr, Scale, Offset and Base.
    """
    t = Table(title=kind.__name__, title_justify="left")
    t.add_column("Name")
    t.add_column("Abbr")
    t.add_column("Scale", justify="right")
    t.add_column("Offset", justify="right")
    t.add_column("Base", justify="center")
    for unit in kind:
        t.add_row(
            Text(unit.name),
            Text(unit.abbr),
            f"{unit.scale:g}",
            f"{unit.offset:g}",
            "*" if unit.is_base else "",
        )
    return t


def print_unit_catalog(*kinds: type[UnitOfMeasure], console: Console | None = None) -> None:
    """Print the unit tables of the given kinds, or of every kind when none is given."""
    kinds = kinds or QUANTITY_KINDS
    console = console or Console()
    for kind in kinds:
        console.print(Panel(unit_catalog(kind), padding=(0, 1)))
