"""Conversion for categories whose units differ by a constant factor."""

import logging
import re
from decimal import Decimal
from typing import List

from measurement_converter.conversion.exceptions import InvalidUnitError
from measurement_converter.conversion.models import ConversionResult, ValidationResult
from measurement_converter.conversion.resolver import normalize_unit
from measurement_converter.conversion.rounding import RoundingMode, round_value
from measurement_converter.conversion.units import UnitTable

logger = logging.getLogger(__name__)


def format_number(number: float) -> str:
    """Render a number the way it appears in formulas and messages.

    Fixed notation for 1e-6 <= |x| < 1e21, exponent form without zero
    padding (1e-7, 1e+21) outside that range.
    """
    if isinstance(number, float) and number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    if number == 0 or 1e-6 <= abs(number) < 1e21:
        return format(Decimal(repr(number)), "f")
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", repr(number))


class LinearConverter:
    """Converts through the base unit of a factor table."""

    def convert(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        table: UnitTable,
        precision: int = 4,
        rounding_mode: RoundingMode = RoundingMode.ROUND
    ) -> ConversionResult:
        """Convert a value between two units of the same table.

        Args:
            value: The numeric value to convert
            from_unit: Source unit symbol, as given by the caller
            to_unit: Target unit symbol, as given by the caller
            table: Factor table of the category
            precision: Decimal digits kept in the result
            rounding_mode: How the result is rounded to precision

        Returns:
            ConversionResult with rounded value and formula

        Raises:
            InvalidUnitError: If either unit is missing from the table
            ConversionError: If the result cannot be rounded
        """
        from_key = normalize_unit(from_unit)
        to_key = normalize_unit(to_unit)

        if from_key not in table or to_key not in table:
            logger.warning(f"Invalid unit combination: {from_unit} -> {to_unit}")
            raise InvalidUnitError(f"Invalid unit combination: {from_unit} -> {to_unit}")

        from_factor = table[from_key]
        to_factor = table[to_key]

        # value -> base unit -> target unit
        base_value = value * from_factor
        result = base_value / to_factor

        logger.debug(f"Linear conversion: {value} {from_unit} -> {result} {to_unit}")

        return ConversionResult(
            from_value=value,
            from_unit=from_unit,
            to_value=round_value(result, precision, rounding_mode),
            to_unit=to_unit,
            formula=(
                f"({format_number(value)} {from_unit}) * "
                f"({format_number(from_factor)}) / ({format_number(to_factor)})"
            ),
            precision=precision
        )

    def validate_units(self, from_unit: str, to_unit: str, table: UnitTable) -> ValidationResult:
        """Check both units against a table without raising."""
        errors: List[str] = []

        if normalize_unit(from_unit) not in table:
            errors.append(f"Invalid source unit: {from_unit}")

        if normalize_unit(to_unit) not in table:
            errors.append(f"Invalid target unit: {to_unit}")

        return ValidationResult(
            is_valid=not errors,
            errors=errors or None
        )
