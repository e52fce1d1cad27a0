"""recipe-dedup — fuzzy near-duplicate detection for recipe collections."""
from recipe_dedup.api import as_recipes, recipe_stats
from recipe_dedup.dedup import (
    OVERALL_SIMILARITY_THRESHOLD,
    DedupStats,
    check_against_corpus,
    classify,
    deduplicate,
    explain,
    is_duplicate,
)
from recipe_dedup.models import (
    DEFAULT_THRESHOLDS,
    DeduplicationResult,
    DuplicateVerdict,
    Recipe,
    SimilarityScores,
    SimilarityThresholds,
)
from recipe_dedup.similarity import (
    ingredient_similarity,
    instruction_similarity,
    levenshtein_distance,
    normalize_ingredient,
    string_similarity,
)

__version__ = "1.0.0"
