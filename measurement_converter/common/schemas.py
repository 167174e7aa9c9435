"""Pydantic schemas for API requests and responses"""
import math
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from measurement_converter.conversion import Category, RoundingMode


# Request Schemas

class ConvertRequestSchema(BaseModel):
    """Single conversion request schema"""
    value: float
    from_unit: str = Field(..., min_length=1, max_length=32)
    to_unit: str = Field(..., min_length=1, max_length=32)
    precision: Optional[int] = Field(None, ge=0, le=15)
    rounding_mode: Optional[RoundingMode] = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v


class BatchItemSchema(BaseModel):
    """Single item within a batch conversion request"""
    value: float
    from_unit: str = Field(..., min_length=1, max_length=32)
    to_unit: str = Field(..., min_length=1, max_length=32)
    precision: Optional[int] = Field(None, ge=0, le=15)


class BatchConvertRequestSchema(BaseModel):
    """Batch conversion request body"""
    requests: List[BatchItemSchema] = Field(..., min_length=1)
    precision: Optional[int] = Field(None, ge=0, le=15)
    rounding_mode: Optional[RoundingMode] = None


# Response Schemas

class ConversionResultSchema(BaseModel):
    """Conversion result schema"""
    from_value: float
    from_unit: str
    to_value: float
    to_unit: str
    formula: str
    precision: int

    model_config = {"from_attributes": True}


class FormatRequestSchema(BaseModel):
    """Result formatting request body"""
    result: ConversionResultSchema
    format: Literal["short", "long"] = "short"


class FormatResponseSchema(BaseModel):
    """Formatted result"""
    text: str


class ValidationResultSchema(BaseModel):
    """Unit validation result schema"""
    unit: str
    is_valid: bool
    errors: Optional[List[str]] = None
    suggestions: Optional[List[str]] = None


class UnitListSchema(BaseModel):
    """Units available for a category, or for all when category is None"""
    category: Optional[Category] = None
    units: List[str]
