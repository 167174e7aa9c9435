"""Resolve a unit symbol to the physical quantity it measures."""

import logging
from typing import Optional

from measurement_converter.conversion.units import (
    Category,
    LINEAR_TABLES,
    TEMPERATURE_UNITS,
)

logger = logging.getLogger(__name__)


def normalize_unit(unit: str) -> str:
    """Normalize a unit symbol for table lookup."""
    return unit.strip().lower()


def resolve_category(unit: str) -> Optional[Category]:
    """Find the category a unit symbol belongs to.

    Categories are scanned in a fixed order (length, weight, volume, area,
    pressure, energy, speed, data, temperature) and the first table that
    contains the symbol wins.

    Args:
        unit: Unit symbol, any case

    Returns:
        The matching Category, or None if no table knows the symbol
    """
    normalized = normalize_unit(unit)

    for category, table in LINEAR_TABLES.items():
        if normalized in table:
            return category

    if normalized in TEMPERATURE_UNITS:
        return Category.TEMPERATURE

    logger.debug(f"No category found for unit: {unit}")
    return None
