"""JSON output."""
import json
from typing import List, Optional, Tuple
from recipe_dedup.models import DeduplicationResult, DuplicateVerdict, Recipe


def _scores(verdict: DuplicateVerdict):
    if verdict.scores is None:
        return None
    s = verdict.scores
    return {
        "title": s.title,
        "ingredients": s.ingredients,
        "instructions": s.instructions,
        "overall": s.overall,
    }


class JSONFormatter:
    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def format(self, result: DeduplicationResult) -> str:
        return json.dumps({
            "unique_recipes": [r.to_dict() for r in result.unique_recipes],
            "duplicates_removed": result.duplicates_removed,
            "duplicate_log": result.duplicate_log,
        }, indent=self.indent, ensure_ascii=False)

    def format_verdicts(self, checks: List[Tuple[Recipe, DuplicateVerdict]]) -> str:
        return json.dumps([{
            "id": recipe.id,
            "title": recipe.title,
            "is_duplicate": v.is_duplicate,
            "reason": v.reason,
            "rule": v.rule,
            "matched_recipe": {"id": v.matched_recipe.id, "title": v.matched_recipe.title}
            if v.matched_recipe else None,
            "scores": _scores(v),
        } for recipe, v in checks], indent=self.indent, ensure_ascii=False)
