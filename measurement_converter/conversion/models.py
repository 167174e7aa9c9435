"""Value objects passed in and out of the converters."""

from dataclasses import dataclass
from typing import List, Optional

from measurement_converter.conversion.rounding import RoundingMode


@dataclass(frozen=True)
class ConversionRequest:
    """Single conversion request."""
    value: float
    from_unit: str
    to_unit: str
    precision: Optional[int] = None


@dataclass(frozen=True)
class ConversionOptions:
    """Options applied to a conversion; None falls back to configured defaults."""
    precision: Optional[int] = None
    rounding_mode: Optional[RoundingMode] = None


@dataclass(frozen=True)
class ConversionResult:
    """Result of a unit conversion."""
    from_value: float
    from_unit: str
    to_value: float
    to_unit: str
    formula: str
    precision: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a unit validation check."""
    is_valid: bool
    errors: Optional[List[str]] = None
    suggestions: Optional[List[str]] = None
