"""Approximate matching of unit symbols."""

from .suggester import UnitSuggester, similarity

__all__ = [
    'UnitSuggester',
    'similarity',
]
