"""Deduplication engine for recipe-dedup."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from recipe_dedup.models import (
    DEFAULT_THRESHOLDS,
    DeduplicationResult,
    DuplicateVerdict,
    Recipe,
    SimilarityScores,
    SimilarityThresholds,
)
from recipe_dedup.similarity import ingredient_similarity, instruction_similarity, string_similarity

logger = logging.getLogger(__name__)

# Mean of title/ingredient/instruction similarity at or above which two recipes
# are duplicates. Not part of SimilarityThresholds.
OVERALL_SIMILARITY_THRESHOLD = 0.75

# Rule names, in the order the classifier tries them
RULE_IDENTICAL_TITLE = "identical_title"
RULE_SIMILAR_TITLE = "similar_title"
RULE_SAME_IMAGE = "same_image"
RULE_SIMILAR_CONTENT = "similar_content"
RULE_OVERALL = "overall_similarity"

DecisionHook = Callable[[Recipe, DuplicateVerdict], None]


@dataclass
class DedupStats:
    """Counters collected during a deduplicate() run, one per classifier rule."""
    total_input: int = 0
    unique_output: int = 0
    identical_title_dupes: int = 0
    similar_title_dupes: int = 0
    same_image_dupes: int = 0
    similar_content_dupes: int = 0
    overall_dupes: int = 0

    @property
    def total_removed(self) -> int:
        return (self.identical_title_dupes + self.similar_title_dupes + self.same_image_dupes
                + self.similar_content_dupes + self.overall_dupes)

    def record(self, rule: str) -> None:
        field_name = {
            RULE_IDENTICAL_TITLE: "identical_title_dupes",
            RULE_SIMILAR_TITLE: "similar_title_dupes",
            RULE_SAME_IMAGE: "same_image_dupes",
            RULE_SIMILAR_CONTENT: "similar_content_dupes",
            RULE_OVERALL: "overall_dupes",
        }[rule]
        setattr(self, field_name, getattr(self, field_name) + 1)

    def summary(self) -> str:
        return (f"Dedup: {self.total_input} → {self.unique_output} "
                f"(removed {self.total_removed}: {self.identical_title_dupes} identical title, "
                f"{self.similar_title_dupes} similar title, {self.same_image_dupes} same image, "
                f"{self.similar_content_dupes} similar content, {self.overall_dupes} overall)")


def _pct(ratio: float) -> str:
    return f"{ratio:.0%}"


def classify(candidate: Recipe, existing: Recipe,
             thresholds: SimilarityThresholds = DEFAULT_THRESHOLDS) -> DuplicateVerdict:
    """Decide whether ``candidate`` duplicates ``existing``.

    Rules are tried in order and the first one that fires wins:
    1. case-insensitive identical title
    2. title similarity >= thresholds.title_similarity
    3. same image (two missing images count as the same)
    4. ingredient AND instruction similarity at or above their thresholds
    5. mean of the three scores >= OVERALL_SIMILARITY_THRESHOLD

    Scores are computed lazily and only once; the reason always describes
    the rule that fired.
    """
    if candidate.title.lower() == existing.title.lower():
        return DuplicateVerdict(
            True, f'Identical title: "{candidate.title}"', existing, RULE_IDENTICAL_TITLE,
            SimilarityScores(title=1.0),
        )

    title_sim = string_similarity(candidate.title, existing.title)
    if title_sim >= thresholds.title_similarity:
        return DuplicateVerdict(
            True, f'Similar title ({_pct(title_sim)} match): "{candidate.title}" vs "{existing.title}"',
            existing, RULE_SIMILAR_TITLE, SimilarityScores(title=title_sim),
        )

    if candidate.image == existing.image:
        return DuplicateVerdict(True, "Same image used", existing, RULE_SAME_IMAGE,
                                SimilarityScores(title=title_sim))

    scores = SimilarityScores(
        title=title_sim,
        ingredients=ingredient_similarity(candidate.ingredients, existing.ingredients),
        instructions=instruction_similarity(candidate.instructions, existing.instructions),
    )
    if (scores.ingredients >= thresholds.ingredient_similarity
            and scores.instructions >= thresholds.instruction_similarity):
        return DuplicateVerdict(
            True,
            f"Similar recipe content ({_pct(scores.ingredients)} ingredients, "
            f"{_pct(scores.instructions)} instructions)",
            existing, RULE_SIMILAR_CONTENT, scores,
        )

    if scores.overall >= OVERALL_SIMILARITY_THRESHOLD:
        return DuplicateVerdict(True, f"High overall similarity ({_pct(scores.overall)})",
                                existing, RULE_OVERALL, scores)

    return DuplicateVerdict(False, scores=scores)


def is_duplicate(candidate: Recipe, existing: Recipe,
                 thresholds: SimilarityThresholds = DEFAULT_THRESHOLDS) -> bool:
    return classify(candidate, existing, thresholds).is_duplicate


def explain(candidate: Recipe, existing: Recipe,
            thresholds: SimilarityThresholds = DEFAULT_THRESHOLDS) -> Optional[str]:
    """Human-readable reason ``candidate`` duplicates ``existing``, or None."""
    return classify(candidate, existing, thresholds).reason


def deduplicate(
    recipes: Sequence[Recipe],
    thresholds: Optional[SimilarityThresholds] = None,
    on_decision: Optional[DecisionHook] = None,
    stats: Optional[DedupStats] = None,
) -> DeduplicationResult:
    """Filter ``recipes`` down to uniques, keeping the first of each cluster.

    Each recipe is compared only against recipes already accepted, so the
    result depends on input order.

    Args:
        recipes: Recipes in input order. Never modified.
        thresholds: Similarity cutoffs (defaults: 0.8 / 0.7 / 0.6).
        on_decision: Optional callback invoked as ``on_decision(recipe, verdict)``
            once per recipe, after it is accepted or rejected.
        stats: Optional DedupStats to fill in.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    unique: List[Recipe] = []
    log: List[str] = []

    for recipe in recipes:
        verdict = DuplicateVerdict(False)
        for kept in unique:
            match = classify(recipe, kept, thresholds)
            if match.is_duplicate:
                verdict = match
                break

        if verdict.is_duplicate:
            message = f'Skipped: "{recipe.title}" ({recipe.category}) - {verdict.reason}'
            log.append(message)
            if stats is not None:
                stats.record(verdict.rule)
            logger.debug(f"[Dedup] {message}")
        else:
            unique.append(recipe)
            logger.debug(f'[Dedup] Added: "{recipe.title}" ({recipe.category})')

        if on_decision is not None:
            on_decision(recipe, verdict)

    if stats is not None:
        stats.total_input += len(recipes)
        stats.unique_output += len(unique)

    logger.info(f"[Dedup] {len(recipes)} recipes → {len(unique)} unique, {len(log)} duplicates removed")
    return DeduplicationResult(unique_recipes=unique, duplicates_removed=len(log), duplicate_log=log)


def check_against_corpus(
    new_recipe: Recipe,
    existing_recipes: Sequence[Recipe],
    thresholds: Optional[SimilarityThresholds] = None,
    on_decision: Optional[DecisionHook] = None,
) -> DuplicateVerdict:
    """Return the verdict for the first corpus entry ``new_recipe`` duplicates.

    The corpus is scanned in order and does not need to be deduplicated.
    Returns a negative verdict (no reason, no match) if nothing matches.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    verdict = DuplicateVerdict(False)
    for existing in existing_recipes:
        match = classify(new_recipe, existing, thresholds)
        if match.is_duplicate:
            verdict = match
            logger.debug(f'[Dedup] "{new_recipe.title}" matches "{existing.title}": {match.reason}')
            break

    if on_decision is not None:
        on_decision(new_recipe, verdict)
    return verdict
