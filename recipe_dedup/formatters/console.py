"""Rich console output."""
from typing import List, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from recipe_dedup.models import DeduplicationResult, DuplicateVerdict, Recipe


class ConsoleFormatter:
    def format(self, result: DeduplicationResult) -> str:
        console = Console(record=True, width=120)
        console.print(Panel(
            f"[bold cyan]🍳 Recipe Dedup[/] — {len(result.unique_recipes)} unique, "
            f"{result.duplicates_removed} duplicates removed",
            expand=False,
        ))

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("ID")
        table.add_column("Title", style="bold white")
        table.add_column("Category", style="dim")
        for i, r in enumerate(result.unique_recipes, 1):
            table.add_row(str(i), escape(r.id), escape(r.title), escape(r.category) or "—")
        console.print(table)

        if result.duplicate_log:
            console.print("\n[bold yellow]Duplicates[/]")
            for line in result.duplicate_log:
                console.print(f"   ✗ {line}", markup=False)

        return console.export_text()

    def format_verdicts(self, checks: List[Tuple[Recipe, DuplicateVerdict]]) -> str:
        console = Console(record=True, width=120)
        dupes = sum(1 for _, v in checks if v.is_duplicate)
        console.print(Panel(f"[bold cyan]🍳 Recipe Check[/] — {dupes} of {len(checks)} already in corpus",
                            expand=False))
        for recipe, verdict in checks:
            if verdict.is_duplicate:
                console.print(f"\n❌ {recipe.title}", markup=False)
                console.print(f"   {verdict.reason}", markup=False)
                console.print(f"   matches: {verdict.matched_recipe.title} (id {verdict.matched_recipe.id})",
                              markup=False)
            else:
                console.print(f"\n✅ {recipe.title}", markup=False)
                console.print("   [dim]no duplicate found[/]")
        return console.export_text()
