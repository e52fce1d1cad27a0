"""Markdown output."""
from typing import List, Tuple
from recipe_dedup.models import DeduplicationResult, DuplicateVerdict, Recipe


class MarkdownFormatter:
    def format(self, result: DeduplicationResult) -> str:
        lines = [f"# 🍳 Recipe Dedup — {len(result.unique_recipes)} unique recipes\n"]
        for i, r in enumerate(result.unique_recipes, 1):
            lines.append(f"### {i}. {r.title}")
            lines.append(f"**ID:** {r.id} | **Category:** {r.category or 'unknown'}")
            if r.author:
                lines.append(f"**Author:** {r.author}")
            lines.append("")
        if result.duplicate_log:
            lines.append(f"## Duplicates removed ({result.duplicates_removed})\n")
            for line in result.duplicate_log:
                lines.append(f"- {line}")
            lines.append("")
        return "\n".join(lines)

    def format_verdicts(self, checks: List[Tuple[Recipe, DuplicateVerdict]]) -> str:
        lines = ["# 🍳 Recipe Check\n"]
        for recipe, v in checks:
            if v.is_duplicate:
                lines.append(f"- ❌ **{recipe.title}** — {v.reason} (matches *{v.matched_recipe.title}*)")
            else:
                lines.append(f"- ✅ **{recipe.title}** — no duplicate found")
        lines.append("")
        return "\n".join(lines)
