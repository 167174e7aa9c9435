"""Temperature conversion between Celsius, Fahrenheit and Kelvin."""

import logging
from typing import Callable, Dict, Tuple

from measurement_converter.conversion.exceptions import InvalidUnitError
from measurement_converter.conversion.models import ConversionResult, ValidationResult
from measurement_converter.conversion.resolver import normalize_unit
from measurement_converter.conversion.rounding import RoundingMode, round_value
from measurement_converter.conversion.units import TEMPERATURE_UNITS

logger = logging.getLogger(__name__)

KELVIN_OFFSET = 273.15

# (from, to) -> affine transform
TRANSFORMS: Dict[Tuple[str, str], Callable[[float], float]] = {
    ("c", "f"): lambda v: v * 9 / 5 + 32,
    ("c", "k"): lambda v: v + KELVIN_OFFSET,
    ("f", "c"): lambda v: (v - 32) * 5 / 9,
    ("f", "k"): lambda v: (v - 32) * 5 / 9 + KELVIN_OFFSET,
    ("k", "c"): lambda v: v - KELVIN_OFFSET,
    ("k", "f"): lambda v: (v - KELVIN_OFFSET) * 9 / 5 + 32,
}

FORMULAS: Dict[Tuple[str, str], str] = {
    ("c", "f"): "(°C × 9/5) + 32",
    ("c", "k"): "°C + 273.15",
    ("f", "c"): "(°F - 32) × 5/9",
    ("f", "k"): "(°F - 32) × 5/9 + 273.15",
    ("k", "c"): "K - 273.15",
    ("k", "f"): "(K - 273.15) × 9/5 + 32",
}

DEFAULT_FORMULA = "Direct conversion"


def _identity(value: float) -> float:
    return value


class TemperatureConverter:
    """Converts temperatures with affine (scale + offset) transforms."""

    def convert(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        precision: int = 4,
        rounding_mode: RoundingMode = RoundingMode.ROUND
    ) -> ConversionResult:
        """Convert a temperature between C, F and K.

        Raises:
            InvalidUnitError: If either unit is not a temperature unit
        """
        from_key = normalize_unit(from_unit)
        to_key = normalize_unit(to_unit)

        if from_key not in TEMPERATURE_UNITS or to_key not in TEMPERATURE_UNITS:
            logger.warning(f"Invalid temperature units: {from_unit} -> {to_unit}")
            raise InvalidUnitError("Invalid temperature unit. Valid units are: C, F, K")

        converted = self.get_transform(from_key, to_key)(value)
        logger.debug(f"Temperature conversion: {value} {from_unit} -> {converted} {to_unit}")

        return ConversionResult(
            from_value=value,
            from_unit=from_unit,
            to_value=round_value(converted, precision, rounding_mode),
            to_unit=to_unit,
            formula=self.get_formula(from_key, to_key),
            precision=precision
        )

    def get_transform(self, from_unit: str, to_unit: str) -> Callable[[float], float]:
        """Select the transform for a pair of normalized units."""
        if from_unit == to_unit:
            return _identity

        transform = TRANSFORMS.get((from_unit, to_unit))
        if transform is None:
            raise InvalidUnitError(f"Unable to convert from {from_unit} to {to_unit}")
        return transform

    def get_formula(self, from_unit: str, to_unit: str) -> str:
        """Describe the transform for a pair of normalized units."""
        return FORMULAS.get((from_unit, to_unit), DEFAULT_FORMULA)

    def validate_unit(self, unit: str) -> ValidationResult:
        """Check a temperature unit, suggesting the valid set when it is wrong."""
        if normalize_unit(unit) in TEMPERATURE_UNITS:
            return ValidationResult(is_valid=True)

        return ValidationResult(
            is_valid=False,
            errors=[f"Invalid temperature unit: {unit}"],
            suggestions=["C", "F", "K"]
        )
