"""Approximate unit matching using edit distance"""
import logging
from typing import Iterable, List, Optional

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity in [0, 1]; 1.0 means identical."""
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0

    distance = Levenshtein.distance(a, b)
    return (max_length - distance) / max_length


class UnitSuggester:
    """Proposes known units that look like an unrecognized one"""

    def __init__(self, threshold: float = 0.5, max_suggestions: int = 3):
        self.threshold = threshold
        self.max_suggestions = max_suggestions

    def suggest(
        self,
        unit: str,
        all_units: Iterable[str],
        max_suggestions: Optional[int] = None
    ) -> List[str]:
        """Return known units whose similarity to unit exceeds the threshold.

        Matches keep the order of all_units; the list is cut at
        max_suggestions and never holds the same unit twice.
        """
        limit = self.max_suggestions if max_suggestions is None else max_suggestions
        query = unit.strip().lower()

        suggestions: List[str] = []
        for candidate in all_units:
            if len(suggestions) >= limit:
                break
            if candidate in suggestions:
                continue
            if similarity(query, candidate) > self.threshold:
                suggestions.append(candidate)

        logger.debug(f"Suggestions for '{unit}': {suggestions}")
        return suggestions
