"""Unit tables for every supported physical quantity.

Each linear category maps lowercase unit symbols to a scale factor relative
to the category's base unit (the unit whose factor is exactly 1). Tables are
wrapped in read-only mappings and never change after import.
"""

import enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from measurement_converter.conversion.exceptions import ConversionError


class Category(str, enum.Enum):
    """Physical quantity enumeration, in resolution order"""
    LENGTH = "length"
    WEIGHT = "weight"
    VOLUME = "volume"
    AREA = "area"
    PRESSURE = "pressure"
    ENERGY = "energy"
    SPEED = "speed"
    DATA = "data"
    TEMPERATURE = "temperature"


UnitTable = Mapping[str, float]

# Base unit: metre
LENGTH_UNITS: UnitTable = MappingProxyType({
    "m": 1,
    "km": 1000,
    "cm": 0.01,
    "mm": 0.001,
    "mile": 1609.344,
    "yard": 0.9144,
    "foot": 0.3048,
    "inch": 0.0254,
    "nm": 1852,  # nautical mile
    "μm": 0.000001,
    "pm": 1e-12,
})

# Base unit: kilogram
WEIGHT_UNITS: UnitTable = MappingProxyType({
    "kg": 1,
    "g": 0.001,
    "mg": 0.000001,
    "t": 1000,
    "lb": 0.45359237,
    "oz": 0.028349523125,
    "st": 6.35029318,
})

# Base unit: litre
VOLUME_UNITS: UnitTable = MappingProxyType({
    "l": 1,
    "ml": 0.001,
    "m3": 1000,
    "cm3": 0.001,
    "gal": 3.785411784,
    "qt": 0.946352946,
    "pt": 0.473176473,
    "cup": 0.2365882365,
    "floz": 0.0295735295625,
    "tbsp": 0.01478676478125,
    "tsp": 0.00492892159375,
})

# Base unit: square metre
AREA_UNITS: UnitTable = MappingProxyType({
    "m2": 1,
    "km2": 1000000,
    "cm2": 0.0001,
    "mm2": 0.000001,
    "ha": 10000,
    "acre": 4046.86,
    "sqft": 0.092903,
    "sqin": 0.00064516,
})

# Base unit: pascal
PRESSURE_UNITS: UnitTable = MappingProxyType({
    "pa": 1,
    "kpa": 1000,
    "mpa": 1000000,
    "bar": 100000,
    "mbar": 100,
    "psi": 6894.757,
    "atm": 101325,
    "torr": 133.322,
    "mmhg": 133.322,
})

# Base unit: joule
ENERGY_UNITS: UnitTable = MappingProxyType({
    "j": 1,
    "kj": 1000,
    "mj": 1000000,
    "cal": 4.184,
    "kcal": 4184,
    "wh": 3600,
    "kwh": 3600000,
    "btu": 1055.06,
    "ev": 1.602176634e-19,
})

# Base unit: metre per second
SPEED_UNITS: UnitTable = MappingProxyType({
    "mps": 1,
    "kph": 1000 / 3600,
    "mph": 0.44704,
    "knot": 1852 / 3600,
    "fps": 0.3048,
})

# Base unit: byte, binary multiples
DATA_UNITS: UnitTable = MappingProxyType({
    "b": 1,
    "bit": 0.125,
    "kb": 1024,
    "mb": 1024 ** 2,
    "gb": 1024 ** 3,
    "tb": 1024 ** 4,
    "pb": 1024 ** 5,
})

# Temperature is affine, so it has symbols but no factor table
TEMPERATURE_UNITS: Tuple[str, ...] = ("c", "f", "k")

LINEAR_TABLES: Mapping[Category, UnitTable] = MappingProxyType({
    Category.LENGTH: LENGTH_UNITS,
    Category.WEIGHT: WEIGHT_UNITS,
    Category.VOLUME: VOLUME_UNITS,
    Category.AREA: AREA_UNITS,
    Category.PRESSURE: PRESSURE_UNITS,
    Category.ENERGY: ENERGY_UNITS,
    Category.SPEED: SPEED_UNITS,
    Category.DATA: DATA_UNITS,
})

# Curated subsets for UI display
COMMON_UNITS: Mapping[Category, Tuple[str, ...]] = MappingProxyType({
    Category.LENGTH: ("m", "km", "cm", "mm", "mile", "foot", "inch"),
    Category.WEIGHT: ("kg", "g", "lb", "oz"),
    Category.VOLUME: ("l", "ml", "gal", "cup"),
    Category.TEMPERATURE: ("c", "f", "k"),
    Category.AREA: ("m2", "km2", "ha", "acre"),
    Category.PRESSURE: ("pa", "bar", "psi", "atm"),
    Category.ENERGY: ("j", "kj", "cal", "kwh"),
    Category.SPEED: ("kph", "mph", "mps"),
    Category.DATA: ("kb", "mb", "gb", "tb"),
})


def unit_symbols(category: Category) -> Tuple[str, ...]:
    """Return every symbol of a category in table order."""
    if category is Category.TEMPERATURE:
        return TEMPERATURE_UNITS
    return tuple(LINEAR_TABLES[category].keys())



def parse_category(category: Union[Category, str]) -> Category:
    """Coerce a category name (any case) or member to Category.

    Raises:
        ConversionError: If category is not a supported category
    """
    if isinstance(category, Category):
        return category
    try:
        return Category(str(category).strip().lower())
    except ValueError as e:
        raise ConversionError(f"Unknown category: {category}") from e
