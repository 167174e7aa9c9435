"""Conversion module for units of measurement."""

from .converter import MeasurementConverter
from .exceptions import (
    CategoryMismatchError,
    ConversionError,
    InvalidUnitError,
)
from .linear import LinearConverter
from .models import (
    ConversionOptions,
    ConversionRequest,
    ConversionResult,
    ValidationResult,
)
from .resolver import resolve_category
from .rounding import RoundingMode
from .temperature import TemperatureConverter
from .units import Category

__all__ = [
    'MeasurementConverter',
    'LinearConverter',
    'TemperatureConverter',
    'ConversionOptions',
    'ConversionRequest',
    'ConversionResult',
    'ValidationResult',
    'RoundingMode',
    'Category',
    'resolve_category',
    'ConversionError',
    'InvalidUnitError',
    'CategoryMismatchError',
]
