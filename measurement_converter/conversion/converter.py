"""Category-aware conversion facade."""

import logging
from typing import Iterable, List, Optional, Union

from measurement_converter.common.config import settings
from measurement_converter.conversion.exceptions import (
    CategoryMismatchError,
    ConversionError,
    InvalidUnitError,
)
from measurement_converter.conversion.linear import LinearConverter, format_number
from measurement_converter.conversion.models import (
    ConversionOptions,
    ConversionRequest,
    ConversionResult,
    ValidationResult,
)
from measurement_converter.conversion.resolver import resolve_category
from measurement_converter.conversion.rounding import RoundingMode, parse_rounding_mode
from measurement_converter.conversion.temperature import TemperatureConverter
from measurement_converter.conversion.units import (
    COMMON_UNITS,
    LINEAR_TABLES,
    Category,
    parse_category,
    unit_symbols,
)
from measurement_converter.matching.suggester import UnitSuggester

logger = logging.getLogger(__name__)

FORMATS = ("short", "long")


class MeasurementConverter:
    """Converts values between units of any supported category."""

    def __init__(
        self,
        default_precision: Optional[int] = None,
        default_rounding_mode: Optional[RoundingMode] = None,
        suggester: Optional[UnitSuggester] = None
    ):
        """Initialize converter.

        Args:
            default_precision: Digits used when a call gives none (settings default)
            default_rounding_mode: Rounding used when a call gives none (settings default)
            suggester: UnitSuggester for validation (built from settings if omitted)
        """
        conversion_settings = settings.conversion
        self.default_precision = (
            conversion_settings.default_precision if default_precision is None else default_precision
        )
        self.default_rounding_mode = parse_rounding_mode(
            default_rounding_mode or conversion_settings.default_rounding_mode
        )
        self.suggester = suggester or UnitSuggester(
            threshold=conversion_settings.similarity_threshold,
            max_suggestions=conversion_settings.max_suggestions
        )
        self.linear = LinearConverter()
        self.temperature = TemperatureConverter()

    def convert(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        options: Optional[ConversionOptions] = None
    ) -> ConversionResult:
        """Convert a value, picking the converter from the source unit's category.

        Args:
            value: The numeric value to convert
            from_unit: Source unit symbol
            to_unit: Target unit symbol
            options: Optional precision / rounding overrides

        Returns:
            ConversionResult

        Raises:
            InvalidUnitError: If from_unit is unknown or to_unit is not in its table
            CategoryMismatchError: If to_unit belongs to another category
            ConversionError: If the options or value cannot be honoured
        """
        options = options or ConversionOptions()
        precision = self.default_precision if options.precision is None else options.precision
        rounding_mode = parse_rounding_mode(options.rounding_mode or self.default_rounding_mode)

        category = resolve_category(from_unit)
        if category is None:
            logger.warning(f"Unsupported unit: {from_unit}")
            raise InvalidUnitError(f"Unsupported unit: {from_unit}")

        target_category = resolve_category(to_unit)
        if target_category is not None and target_category != category:
            raise CategoryMismatchError(
                f"Cannot convert between different categories: "
                f"{from_unit} ({category.value}) to {to_unit} ({target_category.value})"
            )

        logger.debug(f"Converting {value} {from_unit} -> {to_unit} as {category.value}")

        if category is Category.TEMPERATURE:
            return self.temperature.convert(value, from_unit, to_unit, precision, rounding_mode)

        return self.linear.convert(
            value, from_unit, to_unit, LINEAR_TABLES[category], precision, rounding_mode
        )

    def batch_convert(
        self,
        requests: Iterable[ConversionRequest],
        global_options: Optional[ConversionOptions] = None
    ) -> List[ConversionResult]:
        """Convert several requests; the first failure aborts the batch.

        A request's own precision overrides the one in global_options.
        """
        global_options = global_options or ConversionOptions()
        requests = list(requests)
        logger.info(f"Batch converting {len(requests)} requests")

        results = []
        for request in requests:
            options = ConversionOptions(
                precision=(
                    request.precision if request.precision is not None else global_options.precision
                ),
                rounding_mode=global_options.rounding_mode
            )
            results.append(
                self.convert(request.value, request.from_unit, request.to_unit, options)
            )
        return results

    def validate_unit(self, unit: str) -> ValidationResult:
        """Check whether a unit is known, suggesting close matches when it is not."""
        if resolve_category(unit) is not None:
            return ValidationResult(is_valid=True)

        suggestions = self.suggester.suggest(unit, self.get_available_units())
        return ValidationResult(
            is_valid=False,
            errors=[f"Unknown unit: {unit}"],
            suggestions=suggestions or None
        )

    def validate_conversion(self, from_unit: str, to_unit: str) -> ValidationResult:
        """Check a unit pair without converting anything."""
        category = resolve_category(from_unit)
        if category is None:
            return self.validate_unit(from_unit)

        if category is Category.TEMPERATURE:
            return self.temperature.validate_unit(to_unit)

        return self.linear.validate_units(from_unit, to_unit, LINEAR_TABLES[category])

    def get_available_units(self, category: Optional[Union[Category, str]] = None) -> List[str]:
        """List unit symbols of one category, or of all in resolution order.

        Raises:
            ConversionError: If category is not a supported category
        """
        if category is not None:
            return list(unit_symbols(parse_category(category)))

        units: List[str] = []
        for cat in Category:
            units.extend(unit_symbols(cat))
        return units

    def get_supported_categories(self) -> List[Category]:
        """List every supported category."""
        return list(Category)

    def get_common_units(self, category: Union[Category, str]) -> List[str]:
        """Curated units for display; unknown categories give an empty list."""
        try:
            return list(COMMON_UNITS[parse_category(category)])
        except ConversionError:
            return []

    def format_result(self, result: ConversionResult, format: str = "short") -> str:
        """Render a result as a sentence.

        Raises:
            ConversionError: If format is not 'short' or 'long'
        """
        if format not in FORMATS:
            raise ConversionError(f"Unknown format '{format}', expected one of {list(FORMATS)}")

        from_part = f"{format_number(result.from_value)} {result.from_unit}"
        to_part = f"{format_number(result.to_value)} {result.to_unit}"

        if format == "long":
            return f"{from_part} is equal to {to_part}"
        return f"{from_part} = {to_part}"
