"""API endpoints for unit conversion."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from measurement_converter import default_converter
from measurement_converter.common.schemas import (
    BatchConvertRequestSchema,
    ConversionResultSchema,
    ConvertRequestSchema,
    FormatRequestSchema,
    FormatResponseSchema,
    UnitListSchema,
    ValidationResultSchema,
)
from measurement_converter.conversion import (
    Category,
    ConversionError,
    ConversionOptions,
    ConversionRequest,
    ConversionResult,
    MeasurementConverter,
)
from measurement_converter.conversion.units import parse_category

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/conversion", tags=["conversion"])


def get_converter() -> MeasurementConverter:
    """Get converter instance."""
    return default_converter


@router.post("/convert", response_model=ConversionResultSchema)
def convert(
    request: ConvertRequestSchema,
    converter: MeasurementConverter = Depends(get_converter)
) -> ConversionResultSchema:
    """Convert a single value.

    Args:
        request: Value, units and optional precision / rounding mode
        converter: MeasurementConverter instance

    Returns:
        ConversionResult as schema
    """
    options = ConversionOptions(
        precision=request.precision,
        rounding_mode=request.rounding_mode
    )
    try:
        result = converter.convert(request.value, request.from_unit, request.to_unit, options)
    except ConversionError as e:
        logger.warning(f"Conversion rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return ConversionResultSchema.model_validate(result)


@router.post("/batch", response_model=List[ConversionResultSchema])
def batch_convert(
    request: BatchConvertRequestSchema,
    converter: MeasurementConverter = Depends(get_converter)
) -> List[ConversionResultSchema]:
    """Convert several values; the first invalid item fails the whole request."""
    requests = [
        ConversionRequest(
            value=item.value,
            from_unit=item.from_unit,
            to_unit=item.to_unit,
            precision=item.precision
        )
        for item in request.requests
    ]
    options = ConversionOptions(
        precision=request.precision,
        rounding_mode=request.rounding_mode
    )
    try:
        results = converter.batch_convert(requests, options)
    except ConversionError as e:
        logger.warning(f"Batch conversion rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return [ConversionResultSchema.model_validate(result) for result in results]


@router.get("/validate/{unit}", response_model=ValidationResultSchema)
def validate_unit(
    unit: str,
    converter: MeasurementConverter = Depends(get_converter)
) -> ValidationResultSchema:
    """Check a unit symbol and suggest corrections."""
    result = converter.validate_unit(unit)
    return ValidationResultSchema(
        unit=unit,
        is_valid=result.is_valid,
        errors=result.errors,
        suggestions=result.suggestions
    )


@router.get("/units", response_model=UnitListSchema)
def get_units(
    category: str = None,
    converter: MeasurementConverter = Depends(get_converter)
) -> UnitListSchema:
    """List available units, optionally for one category."""
    if category is None:
        return UnitListSchema(units=converter.get_available_units())

    try:
        resolved = parse_category(category)
    except ConversionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return UnitListSchema(category=resolved, units=converter.get_available_units(resolved))


@router.get("/units/common/{category}", response_model=UnitListSchema)
def get_common_units(
    category: str,
    converter: MeasurementConverter = Depends(get_converter)
) -> UnitListSchema:
    """List the curated display units of a category."""
    try:
        resolved = parse_category(category)
    except ConversionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return UnitListSchema(category=resolved, units=converter.get_common_units(resolved))


@router.get("/categories", response_model=List[Category])
def get_categories(
    converter: MeasurementConverter = Depends(get_converter)
) -> List[Category]:
    """List supported categories."""
    return converter.get_supported_categories()


@router.post("/format", response_model=FormatResponseSchema)
def format_result(
    request: FormatRequestSchema,
    converter: MeasurementConverter = Depends(get_converter)
) -> FormatResponseSchema:
    """Render a conversion result as text."""
    result = ConversionResult(**request.result.model_dump())
    return FormatResponseSchema(text=converter.format_result(result, request.format))
