"""Custom exceptions for unit conversion"""


class ConversionError(Exception):
    """Base exception for conversion failures"""
    pass


class InvalidUnitError(ConversionError):
    """Raised when a unit symbol is not recognized"""
    pass


class CategoryMismatchError(InvalidUnitError):
    """Raised when source and target units belong to different categories"""
    pass
