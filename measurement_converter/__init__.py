"""Measurement Converter - unit conversion across physical quantities"""

from measurement_converter.conversion import (
    Category,
    CategoryMismatchError,
    ConversionError,
    ConversionOptions,
    ConversionRequest,
    ConversionResult,
    InvalidUnitError,
    MeasurementConverter,
    RoundingMode,
    ValidationResult,
)

__version__ = "0.1.0"

# Shared converter behind the module-level API
default_converter = MeasurementConverter()

convert = default_converter.convert
batch_convert = default_converter.batch_convert
validate_unit = default_converter.validate_unit
get_available_units = default_converter.get_available_units
get_supported_categories = default_converter.get_supported_categories
get_common_units = default_converter.get_common_units
format_result = default_converter.format_result

__all__ = [
    'MeasurementConverter',
    'Category',
    'ConversionOptions',
    'ConversionRequest',
    'ConversionResult',
    'ValidationResult',
    'RoundingMode',
    'ConversionError',
    'InvalidUnitError',
    'CategoryMismatchError',
    'default_converter',
    'convert',
    'batch_convert',
    'validate_unit',
    'get_available_units',
    'get_supported_categories',
    'get_common_units',
    'format_result',
]
