"""
Basic example of using measurekit.
"""

from measurekit import (
    LengthUnit,
    Temperature,
    TemperatureUnit,
    Value,
    VelocityUnit,
    print_unit_catalog,
)


def main():
    print("=" * 80)
    print("measurekit - Basic Example")
    print("=" * 80)

    # Convert a length
    print("\nConverting a length...")
    height = Value(10.0, LengthUnit.METERS)
    print(f"{height} = {height.convert(LengthUnit.FEET)}")

    # Affine conversion
    print("\n" + "-" * 80)
    print("Converting temperatures...")
    for unit in TemperatureUnit:
        print(f"  {Temperature(0.0, TemperatureUnit.CELSIUS).convert(unit)}")

    # Parse user input
    print("\n" + "-" * 80)
    print("Parsing user input...")
    for text in ("25 kn", "90 Kilometers per Hour", "12 warp"):
        speed = Value.parse(text, VelocityUnit)
        if speed is None:
            print(f"  {text!r}: unknown unit, expected one of {VelocityUnit.all_abbrs()}")
        else:
            print(f"  {text!r}: {speed.convert(VelocityUnit.METERS_PER_SECOND)}")

    # Help text
    print("\n" + "-" * 80)
    print_unit_catalog(LengthUnit, VelocityUnit)


if __name__ == "__main__":
    main()
