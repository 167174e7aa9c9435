"""Decimal rounding shared by the converters."""

import enum
import math
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    ROUND_CEILING,
    ROUND_FLOOR,
    ROUND_HALF_UP,
)

from measurement_converter.conversion.exceptions import ConversionError


class RoundingMode(str, enum.Enum):
    """Rounding mode enumeration"""
    ROUND = "round"
    CEIL = "ceil"
    FLOOR = "floor"


_DECIMAL_ROUNDING = {
    RoundingMode.ROUND: ROUND_HALF_UP,
    RoundingMode.CEIL: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
}


def parse_rounding_mode(mode) -> RoundingMode:
    """Coerce a rounding mode name or member to RoundingMode.

    Raises:
        ConversionError: If mode is not a known rounding mode
    """
    try:
        return RoundingMode(mode)
    except ValueError as e:
        raise ConversionError(f"Unknown rounding mode: {mode}") from e


def round_value(value: float, precision: int, mode: RoundingMode = RoundingMode.ROUND) -> float:
    """Round a float to a fixed number of decimal digits.

    Works on the exact binary value of the float, so half-way cases behave
    like a fixed-point formatter rather than Python's round().

    Raises:
        ConversionError: If precision is negative or value is not finite
    """
    if precision < 0:
        raise ConversionError(f"Precision must be non-negative, got {precision}")
    if not math.isfinite(value):
        raise ConversionError(f"Cannot round non-finite value: {value}")

    quantum = Decimal(1).scaleb(-precision)
    # Enough digits for the largest double plus the requested decimals
    context = Context(prec=400 + precision)
    try:
        rounded = Decimal(value).quantize(
            quantum,
            rounding=_DECIMAL_ROUNDING[parse_rounding_mode(mode)],
            context=context,
        )
    except InvalidOperation as e:
        raise ConversionError(f"Cannot round {value} to {precision} digits") from e

    result = float(rounded)
    # Avoid -0.0 leaking into results
    return 0.0 if result == 0 else result
