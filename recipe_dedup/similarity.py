"""Fuzzy similarity measures for recipe text.

All scores are ratios in [0, 1] where 1.0 means identical after
normalization (lowercase, surrounding whitespace trimmed).
"""
import re
from typing import Sequence

from rapidfuzz.distance import Levenshtein

# Two normalized ingredient names count as the same ingredient above this ratio
INGREDIENT_MATCH_THRESHOLD = 0.8

# A leading "<amount> <unit>" token, e.g. "2 cups", "500g", "1.5 tbsp". Matched
# against lowercased text.
_QUANTITY_UNIT_RE = re.compile(r"^\d+(?:[.,/]\d+)?\s*(?:cup|tbsp|tsp|lb|oz|piece|g|kg|ml|l)s?\b\s*")


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """Normalized edit-distance ratio between two strings.

    >>> string_similarity("Banana Bread", "banana bread ")
    1.0
    """
    a = a.lower().strip()
    b = b.lower().strip()
    if a == b:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))


def normalize_ingredient(text: str) -> str:
    """Lowercase an ingredient line and drop a leading quantity + unit."""
    return _QUANTITY_UNIT_RE.sub("", text.lower(), count=1).strip()


def ingredient_similarity(ingredients1: Sequence[str], ingredients2: Sequence[str]) -> float:
    """Fuzzy overlap ratio between two ingredient lists.

    Each ingredient of the first list counts as matched when some ingredient
    of the second list is more than 80% similar to it. The match count is
    divided by the longer list's length, so the result depends on argument
    order when one list holds near-duplicate entries.
    """
    if not ingredients1 and not ingredients2:
        return 1.0
    if not ingredients1 or not ingredients2:
        return 0.0

    normalized1 = [normalize_ingredient(i) for i in ingredients1]
    normalized2 = [normalize_ingredient(i) for i in ingredients2]

    matches = 0
    for ing1 in normalized1:
        if any(string_similarity(ing1, ing2) > INGREDIENT_MATCH_THRESHOLD for ing2 in normalized2):
            matches += 1
    return matches / max(len(normalized1), len(normalized2))


def instruction_similarity(instructions1: Sequence[str], instructions2: Sequence[str]) -> float:
    """Similarity of two instruction lists compared as one block of text each."""
    if not instructions1 and not instructions2:
        return 1.0
    if not instructions1 or not instructions2:
        return 0.0
    return string_similarity(_join(instructions1), _join(instructions2))


def _join(steps: Sequence[str]) -> str:
    return " ".join(steps).lower()
