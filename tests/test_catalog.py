"""
Tests for the unit catalog help text.
"""

import io
import unittest

from rich.console import Console

from measurekit.unit import QUANTITY_KINDS, LengthUnit, TemperatureUnit, print_unit_catalog, unit_catalog


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestUnitCatalog(unittest.TestCase):
    """Test unit_catalog and print_unit_catalog."""

    def test_table_shape(self):
        """Test one row per unit and the expected columns."""
        table = unit_catalog(LengthUnit)
        self.assertEqual(table.row_count, len(LengthUnit))
        self.assertEqual([c.header for c in table.columns], ["Name", "Abbr", "Scale", "Offset", "Base"])
        self.assertEqual(table.title, "LengthUnit")

    def test_rows_follow_declaration_order(self):
        """Test that rows are index-aligned with all_names and all_abbrs."""
        table = unit_catalog(TemperatureUnit)
        names = [str(cell) for cell in table.columns[0].cells]
        abbrs = [str(cell) for cell in table.columns[1].cells]
        base = [str(cell) for cell in table.columns[4].cells]
        self.assertEqual(names, TemperatureUnit.all_names())
        self.assertEqual(abbrs, TemperatureUnit.all_abbrs())
        self.assertEqual(base, ["*", "", "", ""])

    def test_print_selected_kind(self):
        """Test printing one kind."""
        console = _console()
        print_unit_catalog(LengthUnit, console=console)
        output = console.file.getvalue()
        self.assertIn("LengthUnit", output)
        self.assertIn("Statute Miles", output)
        self.assertIn("nmi", output)
        self.assertNotIn("Kelvin", output)

    def test_print_all_kinds(self):
        """Test printing every kind when none is given."""
        console = _console()
        print_unit_catalog(console=console)
        output = console.file.getvalue()
        for kind in QUANTITY_KINDS:
            self.assertIn(kind.__name__, output)


if __name__ == '__main__':
    unittest.main()
