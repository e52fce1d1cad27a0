"""CLI entry point for recipe-dedup."""
import argparse
import logging
import sys

from recipe_dedup import __version__
from recipe_dedup.dedup import DedupStats, check_against_corpus, deduplicate
from recipe_dedup.formatters import ConsoleFormatter, JSONFormatter, MarkdownFormatter
from recipe_dedup.models import DEFAULT_THRESHOLDS


def _ratio(value: str) -> float:
    """Parse a similarity threshold in [0, 1]."""
    try:
        ratio = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid threshold '{value}'. Use a number between 0.0 and 1.0")
    if not 0.0 <= ratio <= 1.0:
        raise argparse.ArgumentTypeError(f"Threshold {value} out of range. Use a number between 0.0 and 1.0")
    return ratio


def _load(path: str):
    from recipe_dedup.corpus import load_recipes_file
    try:
        return load_recipes_file(path)
    except (OSError, ValueError) as e:
        print(f"Error loading recipes file: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="recipe-dedup",
        description="🍳 recipe-dedup — find near-duplicate recipes",
    )
    parser.add_argument("corpus", nargs="?", default=None,
                        help="Recipes file (YAML or JSON) to deduplicate or check against")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--check", type=str, default=None, metavar="FILE",
                        help="Check each recipe in FILE against the corpus instead of deduplicating it")
    parser.add_argument("-f", "--format", choices=["console", "json", "markdown"], default="console",
                        help="Output format (default: console)")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Write output to file instead of stdout")
    parser.add_argument("--title-threshold", type=_ratio, default=None, dest="title_threshold",
                        help=f"Title similarity threshold (default: {DEFAULT_THRESHOLDS.title_similarity})")
    parser.add_argument("--ingredient-threshold", type=_ratio, default=None, dest="ingredient_threshold",
                        help=f"Ingredient overlap threshold (default: {DEFAULT_THRESHOLDS.ingredient_similarity})")
    parser.add_argument("--instruction-threshold", type=_ratio, default=None, dest="instruction_threshold",
                        help=f"Instruction similarity threshold "
                             f"(default: {DEFAULT_THRESHOLDS.instruction_similarity})")
    parser.add_argument("--stats", action="store_true",
                        help="Print corpus statistics summary and exit (no recipes)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status messages on stderr")
    parser.add_argument("--no-config", action="store_true",
                        help="Ignore config files (~/.recipe-dedup.yaml, ./recipe-dedup.yaml)")
    parser.add_argument("--init-config", action="store_true", dest="init_config",
                        help="Write a starter config to ~/.recipe-dedup.yaml and exit")

    args = parser.parse_args(argv)

    # Apply config file defaults (CLI args always win)
    if not args.no_config:
        from recipe_dedup.config import apply_config_defaults
        args = apply_config_defaults(parser, args)

    if args.init_config:
        from recipe_dedup.config import generate_starter_config
        path = generate_starter_config()
        print(f"✅ Wrote starter config to {path}")
        return

    if not args.corpus:
        parser.error("a recipes file is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # args already carry config file and env values for unset flags
    from recipe_dedup.config import load_thresholds
    try:
        thresholds = load_thresholds(vars(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    corpus = _load(args.corpus)
    if not args.quiet:
        print(f"📂 Loaded {len(corpus)} recipes from {args.corpus}", file=sys.stderr)

    formatters = {"console": ConsoleFormatter, "json": JSONFormatter, "markdown": MarkdownFormatter}
    formatter = formatters[args.format]()

    found_duplicates = False
    if args.check:
        candidates = _load(args.check)
        checks = [(r, check_against_corpus(r, corpus, thresholds)) for r in candidates]
        found_duplicates = any(v.is_duplicate for _, v in checks)
        output = formatter.format_verdicts(checks)
        count = len(checks)
    else:
        if args.stats:
            from recipe_dedup.api import recipe_stats
            s = recipe_stats(corpus, thresholds=thresholds)
            print("📊 Recipe Corpus Statistics")
            print(f"   Total recipes: {s['total_recipes']}")
            print(f"   Unique recipes: {s['unique_recipes']}")
            print(f"   Duplicates removed: {s['duplicates_removed']}")
            print(f"   Removed by rule: {', '.join(f'{k}={n}' for k, n in s['removed_by_rule'].items())}")
            print(f"   Categories: {', '.join(f'{c}={n}' for c, n in sorted(s['category_counts'].items()))}")
            return
        dedup_stats = DedupStats()
        result = deduplicate(corpus, thresholds=thresholds, stats=dedup_stats)
        if not args.quiet:
            print(f"🔍 {dedup_stats.summary()}", file=sys.stderr)
        output = formatter.format(result)
        count = len(result.unique_recipes)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        if not args.quiet:
            print(f"✅ Wrote {count} recipes to {args.output}", file=sys.stderr)
    else:
        print(output)

    if found_duplicates:
        sys.exit(1)


if __name__ == "__main__":
    main()
