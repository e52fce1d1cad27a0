"""YAML/JSON recipe corpus loader."""
import json
import logging
from pathlib import Path
from typing import List

import yaml

from recipe_dedup.models import Recipe

logger = logging.getLogger(__name__)


def load_recipes_file(path: str) -> List[Recipe]:
    """Load recipes from a YAML or JSON file.

    Accepts either a bare list of recipe objects or a mapping with a
    top-level ``recipes`` list. Expected format (YAML):

        recipes:
          - id: "1"
            title: Fluffy Pancakes
            category: breakfast
            image: https://example.com/pancakes.jpg
            ingredients: [2 cups flour, 2 eggs, 1 cup milk]
            instructions: [Mix everything., Cook on a hot griddle.]
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Recipes file not found: {path}")

    content = p.read_text(encoding="utf-8")

    if p.suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {' '.join(str(e).split())}")
    elif p.suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}")
    else:
        raise ValueError(f"Unsupported recipes file format: {p.suffix} (use .yaml, .yml, or .json)")

    if isinstance(data, dict):
        if "recipes" not in data:
            raise ValueError("Recipes file must be a list or contain a top-level 'recipes' key")
        data = data["recipes"]
    if not isinstance(data, list):
        raise ValueError("'recipes' must be a list")

    recipes = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or "title" not in entry:
            raise ValueError(f"Recipe #{i+1} must be a dict with at least 'title'")
        if not entry.get("id"):
            entry = {**entry, "id": str(i + 1)}
        recipes.append(Recipe.from_dict(entry))

    logger.info(f"[Corpus] Loaded {len(recipes)} recipes from {path}")
    return recipes
