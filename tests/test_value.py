"""
Tests for measured values.
"""

import dataclasses
import unittest

import numpy as np

from measurekit.unit import Length, LengthUnit, MassUnit, Temperature, TemperatureUnit, Value


class TestValueCreation(unittest.TestCase):
    """Test creating values."""

    def test_magnitude_stored_as_float(self):
        """Test that magnitudes are kept as given, as float."""
        v = Value(5, LengthUnit.METERS)
        self.assertEqual(v.value, 5.0)
        self.assertIsInstance(v.value, float)
        self.assertIs(v.unit, LengthUnit.METERS)

    def test_numpy_scalar(self):
        """Test that numpy scalars are accepted."""
        v = Value(np.float32(2.5), LengthUnit.FEET)
        self.assertEqual(v.value, 2.5)
        self.assertIsInstance(v.value, float)

    def test_alias(self):
        """Test that kind aliases build plain values."""
        v = Length(1.0, LengthUnit.KILOMETERS)
        self.assertIsInstance(v, Value)
        self.assertEqual(v, Value(1.0, LengthUnit.KILOMETERS))

    def test_invalid_unit(self):
        """Test that a unit must be a unit member."""
        with self.assertRaises(TypeError):
            Value(1.0, "m")

    def test_invalid_magnitude(self):
        """Test that a non-numeric magnitude is rejected."""
        with self.assertRaises(ValueError):
            Value("abc", LengthUnit.METERS)

    def test_immutable(self):
        """Test that values cannot be modified in place."""
        v = Value(1.0, LengthUnit.METERS)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            v.value = 2.0

    def test_hashable(self):
        """Test that equal values hash equally."""
        self.assertEqual(len({Value(1.0, LengthUnit.METERS), Value(1, LengthUnit.METERS)}), 1)


class TestValueConversion(unittest.TestCase):
    """Test converting values."""

    def test_convert_returns_new_value(self):
        """Test that conversion leaves the source untouched."""
        source = Value(1.0, LengthUnit.KILOMETERS)
        converted = source.convert(LengthUnit.METERS)
        self.assertEqual(converted, Value(1000.0, LengthUnit.METERS))
        self.assertEqual(source, Value(1.0, LengthUnit.KILOMETERS))

    def test_identity(self):
        """Test that converting to the same unit is exact."""
        self.assertEqual(Value(0.1, LengthUnit.FEET).convert(LengthUnit.FEET).value, 0.1)

    def test_to(self):
        """Test getting only the converted magnitude."""
        self.assertAlmostEqual(Temperature(0.0, TemperatureUnit.CELSIUS).to(TemperatureUnit.KELVIN), 273.15)

    def test_kind_mismatch(self):
        """Test that converting to another kind raises TypeError."""
        with self.assertRaises(TypeError):
            Value(1.0, LengthUnit.METERS).convert(MassUnit.KILOGRAMS)
        with self.assertRaises(TypeError):
            Value(1.0, LengthUnit.METERS).to(MassUnit.KILOGRAMS)

    def test_isclose(self):
        """Test approximate equality across units."""
        km = Value(1.0, LengthUnit.KILOMETERS)
        self.assertNotEqual(km, Value(1000.0, LengthUnit.METERS))
        self.assertTrue(km.isclose(Value(1000.0, LengthUnit.METERS)))
        self.assertFalse(km.isclose(Value(1001.0, LengthUnit.METERS)))
        self.assertTrue(km.isclose(Value(1001.0, LengthUnit.METERS), rel_tol=1e-2))
        with self.assertRaises(TypeError):
            km.isclose(Value(1.0, MassUnit.KILOGRAMS))
        with self.assertRaises(TypeError):
            km.isclose(1.0)


class TestValueParsing(unittest.TestCase):
    """Test parsing values."""

    def test_from_str(self):
        """Test a magnitude with unit text."""
        self.assertEqual(Value.from_str(3, "km", LengthUnit), Value(3.0, LengthUnit.KILOMETERS))
        self.assertEqual(Value.from_str(3, "Kilometers (km)", LengthUnit), Value(3.0, LengthUnit.KILOMETERS))
        self.assertIsNone(Value.from_str(3, "furlongs", LengthUnit))

    def test_parse(self):
        """Test the "<magnitude> <unit>" form."""
        self.assertEqual(Value.parse("5.2 m", LengthUnit), Value(5.2, LengthUnit.METERS))
        self.assertEqual(Value.parse("  -40 °F ", TemperatureUnit), Value(-40.0, TemperatureUnit.FAHRENHEIT))
        self.assertEqual(Value.parse("12 Statute Miles (mi)", LengthUnit), Value(12.0, LengthUnit.STATUTE_MILES))

    def test_parse_failure(self):
        """Test that malformed text gives None."""
        self.assertIsNone(Value.parse("abc m", LengthUnit))
        self.assertIsNone(Value.parse("5.2", LengthUnit))
        self.assertIsNone(Value.parse("5.2 furlongs", LengthUnit))
        self.assertIsNone(Value.parse("5.2 kg", LengthUnit))
        self.assertIsNone(Value.parse(None, LengthUnit))

    def test_parse_display_round_trip(self):
        """Test that the display form parses back to the same value."""
        v = Value(1 / 3, LengthUnit.NAUTICAL_MILES)
        self.assertEqual(Value.parse(str(v), LengthUnit), v)


class TestValueArithmetic(unittest.TestCase):
    """Test arithmetic and ordering."""

    def test_add_sub_keep_left_unit(self):
        """Test that the right operand is converted into the left unit."""
        km = Value(1.0, LengthUnit.KILOMETERS)
        self.assertEqual(km + Value(500.0, LengthUnit.METERS), Value(1.5, LengthUnit.KILOMETERS))
        self.assertEqual(km - Value(250.0, LengthUnit.METERS), Value(0.75, LengthUnit.KILOMETERS))

    def test_scalar(self):
        """Test scaling by a number."""
        v = Value(1.5, LengthUnit.METERS)
        self.assertEqual(2 * v, Value(3.0, LengthUnit.METERS))
        self.assertEqual(v * 2, Value(3.0, LengthUnit.METERS))
        self.assertEqual(v / 3, Value(0.5, LengthUnit.METERS))
        self.assertEqual(-v, Value(-1.5, LengthUnit.METERS))
        self.assertEqual(abs(-v), v)

    def test_unsupported_operands(self):
        """Test that mixing kinds or bare numbers raises TypeError."""
        v = Value(1.0, LengthUnit.METERS)
        with self.assertRaises(TypeError):
            v + Value(1.0, MassUnit.KILOGRAMS)
        with self.assertRaises(TypeError):
            v + 1.0
        with self.assertRaises(TypeError):
            v * "2"
        with self.assertRaises(TypeError):
            v * v

    def test_numpy_array_operands(self):
        """Test that numpy arrays leave the operation to Value and fail."""
        v = Value(1.0, LengthUnit.METERS)
        with self.assertRaises(TypeError):
            np.array([1.0, 2.0]) * v
        with self.assertRaises(TypeError):
            v * np.array([1.0, 2.0])

    def test_ordering(self):
        """Test comparisons across units."""
        self.assertGreater(Value(1.0, LengthUnit.KILOMETERS), Value(999.0, LengthUnit.METERS))
        self.assertLess(Value(1.0, LengthUnit.FEET), Value(1.0, LengthUnit.METERS))
        self.assertGreaterEqual(Value(1.0, LengthUnit.KILOMETERS), Value(1000.0, LengthUnit.METERS))
        self.assertLessEqual(Value(1.0, LengthUnit.KILOMETERS), Value(1000.0, LengthUnit.METERS))

    def test_sorting(self):
        """Test sorting values expressed in different units."""
        values = [
            Value(1.0, LengthUnit.STATUTE_MILES),
            Value(1.0, LengthUnit.METERS),
            Value(1.0, LengthUnit.NAUTICAL_MILES),
            Value(1.0, LengthUnit.FEET),
        ]
        self.assertEqual(
            [v.unit for v in sorted(values)],
            [LengthUnit.FEET, LengthUnit.METERS, LengthUnit.STATUTE_MILES, LengthUnit.NAUTICAL_MILES],
        )

    def test_ordering_kind_mismatch(self):
        """Test that comparing different kinds raises TypeError."""
        with self.assertRaises(TypeError):
            Value(1.0, LengthUnit.METERS) < Value(1.0, MassUnit.KILOGRAMS)
        with self.assertRaises(TypeError):
            Value(1.0, LengthUnit.METERS) < 5


class TestValueDisplay(unittest.TestCase):
    """Test text output."""

    def test_str(self):
        """Test the magnitude followed by the abbreviation."""
        self.assertEqual(str(Value(5.2, LengthUnit.METERS)), "5.2 m")
        self.assertEqual(str(Value(5, LengthUnit.METERS)), "5.0 m")
        self.assertEqual(str(Value(-40, TemperatureUnit.CELSIUS)), "-40.0 °C")
        self.assertEqual(f"{Value(0.5, MassUnit.POUNDS)}", "0.5 lb")

    def test_repr(self):
        """Test the debugging representation."""
        self.assertEqual(repr(Value(5.2, LengthUnit.METERS)), "Value(5.2, LengthUnit.METERS)")


if __name__ == '__main__':
    unittest.main()
