"""Tests for the library API."""
from recipe_dedup import Recipe, as_recipes, recipe_stats


def test_as_recipes_accepts_dicts_and_objects():
    r = Recipe(title="Toast")
    out = as_recipes([r, {"title": "Jam"}])
    assert out[0] is r
    assert out[1].title == "Jam"


def test_recipe_stats():
    records = [
        {"id": "1", "title": "Chocolate Cake", "category": "Dessert", "image": "cake.jpg"},
        {"id": "2", "title": "chocolate cake", "category": "Dessert", "image": "cake-2.jpg"},
        {"id": "3", "title": "Garden Salad", "category": "salad", "image": "salad.jpg",
         "ingredients": ["lettuce"], "instructions": ["Toss the leaves with dressing."]},
    ]
    stats = recipe_stats(records)
    assert stats["total_recipes"] == 3
    assert stats["unique_recipes"] == 2
    assert stats["duplicates_removed"] == 1
    assert stats["category_counts"] == {"dessert": 1, "salad": 1}
    assert stats["removed_by_rule"]["identical_title"] == 1


def test_recipe_stats_empty():
    stats = recipe_stats([])
    assert stats["total_recipes"] == 0
    assert stats["category_counts"] == {}
