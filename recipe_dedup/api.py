"""Public Python API for recipe-dedup — use as a library.

Quick start:

    from recipe_dedup import Recipe, deduplicate, check_against_corpus

    result = deduplicate(recipes)
    print(f"{result.duplicates_removed} duplicates removed")
    for line in result.duplicate_log:
        print(line)

    verdict = check_against_corpus(new_recipe, result.unique_recipes)
    if verdict.is_duplicate:
        print(verdict.reason, verdict.matched_recipe.title)

Corpus statistics:

    stats = recipe_stats(recipes)
    print(stats["unique_recipes"], stats["category_counts"])
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from recipe_dedup.dedup import DedupStats, deduplicate
from recipe_dedup.models import Recipe, SimilarityThresholds


def as_recipes(records: Sequence[Union[Recipe, Dict[str, Any]]]) -> List[Recipe]:
    """Accept Recipe objects or plain dicts and return Recipe objects."""
    return [r if isinstance(r, Recipe) else Recipe.from_dict(r) for r in records]


def recipe_stats(
    recipes: Sequence[Union[Recipe, Dict[str, Any]]],
    thresholds: Optional[SimilarityThresholds] = None,
) -> Dict[str, Any]:
    """Deduplicate ``recipes`` and summarize the outcome.

    Args:
        recipes: Recipe objects or plain dicts.
        thresholds: Similarity cutoffs for the dedup pass.

    Returns:
        Dict with ``total_recipes``, ``unique_recipes``, ``duplicates_removed``,
        ``category_counts`` (lowercased category → count of unique recipes)
        and ``removed_by_rule``.
    """
    items = as_recipes(recipes)
    dedup_stats = DedupStats()
    result = deduplicate(items, thresholds=thresholds, stats=dedup_stats)

    category_counts: Dict[str, int] = {}
    for recipe in result.unique_recipes:
        category = recipe.category.lower()
        category_counts[category] = category_counts.get(category, 0) + 1

    return {
        "total_recipes": len(items),
        "unique_recipes": len(result.unique_recipes),
        "duplicates_removed": result.duplicates_removed,
        "category_counts": category_counts,
        "removed_by_rule": {
            "identical_title": dedup_stats.identical_title_dupes,
            "similar_title": dedup_stats.similar_title_dupes,
            "same_image": dedup_stats.same_image_dupes,
            "similar_content": dedup_stats.similar_content_dupes,
            "overall_similarity": dedup_stats.overall_dupes,
        },
    }
