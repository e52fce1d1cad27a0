"""Tests for string and set similarity measures."""
import pytest

from recipe_dedup.similarity import (
    ingredient_similarity,
    instruction_similarity,
    levenshtein_distance,
    normalize_ingredient,
    string_similarity,
)

PAIRS = [
    ("Banana Bread", "Banana Loaf"),
    ("kitten", "sitting"),
    ("", "pancakes"),
    ("Fluffy Pancakes", "Banana Pancakes"),
    ("  Lemon Tart ", "lemon tarts"),
    ("a", "b"),
]


class TestLevenshtein:
    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_empty(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "") == 3

    def test_case_sensitive(self):
        # normalization happens in string_similarity, not here
        assert levenshtein_distance("A", "a") == 1


class TestStringSimilarity:
    @pytest.mark.parametrize("s", ["", "pancakes", "Banana Bread", "  spaced  "])
    def test_identity(self, s):
        assert string_similarity(s, s) == 1.0

    def test_case_and_whitespace_ignored(self):
        assert string_similarity("  Banana Bread", "banana bread ") == 1.0

    def test_ratio(self):
        assert string_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_symmetric(self, a, b):
        assert string_similarity(a, b) == string_similarity(b, a)

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_range(self, a, b):
        assert 0.0 <= string_similarity(a, b) <= 1.0

    def test_completely_different(self):
        assert string_similarity("abc", "xyz") == 0.0
        assert string_similarity("", "abc") == 0.0


class TestNormalizeIngredient:
    @pytest.mark.parametrize("raw,expected", [
        ("2 cups flour", "flour"),
        ("1 cup Milk", "milk"),
        ("500g Sugar", "sugar"),
        ("1 tbsp olive oil", "olive oil"),
        ("2 TSP vanilla", "vanilla"),
        ("2 lbs beef chuck", "beef chuck"),
        ("4 oz cheddar", "cheddar"),
        ("3 pieces chicken", "chicken"),
        ("1.5 kg potatoes", "potatoes"),
        ("250 ml cream", "cream"),
        ("1 l water", "water"),
    ])
    def test_strips_quantity_and_unit(self, raw, expected):
        assert normalize_ingredient(raw) == expected

    @pytest.mark.parametrize("raw", ["2 CUPS Flour", "2 Cups flour", "2 cUpS FLOUR"])
    def test_unit_case_is_ignored(self, raw):
        assert normalize_ingredient(raw) == "flour"

    def test_no_unit_keeps_amount(self):
        assert normalize_ingredient("2 Eggs") == "2 eggs"

    def test_unit_must_be_whole_word(self):
        # "l" is a unit but "large" is not
        assert normalize_ingredient("2 large eggs") == "2 large eggs"

    def test_only_one_leading_token(self):
        assert normalize_ingredient("2 cups 1 tbsp sugar") == "1 tbsp sugar"

    def test_plain_name(self):
        assert normalize_ingredient("  Salt ") == "salt"


class TestIngredientSimilarity:
    def test_both_empty(self):
        assert ingredient_similarity([], []) == 1.0

    def test_one_empty(self):
        assert ingredient_similarity([], ["x"]) == 0.0
        assert ingredient_similarity(["x"], []) == 0.0

    def test_quantities_ignored(self):
        a = ["2 cups flour", "1 cup milk", "2 tbsp sugar"]
        b = ["3 cups flour", "2 cups milk", "1 tbsp sugar"]
        assert ingredient_similarity(a, b) == 1.0

    def test_partial_overlap(self):
        a = ["flour", "milk", "sugar", "butter"]
        b = ["flour", "milk", "salt", "yeast"]
        assert ingredient_similarity(a, b) == 0.5

    def test_divides_by_longer_list(self):
        assert ingredient_similarity(["flour"], ["flour", "milk", "eggs", "sugar"]) == 0.25

    def test_fuzzy_match(self):
        # "tomatoes" vs "tomatos" is ~0.875 similar
        assert ingredient_similarity(["tomatoes"], ["tomatos"]) == 1.0

    def test_match_is_strictly_above_cutoff(self):
        # exactly 80% similar does not count as the same ingredient
        assert ingredient_similarity(["abcde"], ["abcdx"]) == 0.0

    def test_argument_order_matters(self):
        assert ingredient_similarity(["flour", "flour"], ["flour", "sugar"]) == 1.0
        assert ingredient_similarity(["flour", "sugar"], ["flour", "flour"]) == 0.5


class TestInstructionSimilarity:
    def test_both_empty(self):
        assert instruction_similarity([], []) == 1.0

    def test_one_empty(self):
        assert instruction_similarity([], ["Mix."]) == 0.0
        assert instruction_similarity(["Mix."], []) == 0.0

    def test_steps_joined_as_one_block(self):
        a = ["Mix the batter.", "Bake for 30 minutes."]
        b = ["Mix the batter. Bake for 30 minutes."]
        assert instruction_similarity(a, b) == 1.0

    def test_case_ignored(self):
        assert instruction_similarity(["MIX WELL"], ["mix well"]) == 1.0

    def test_matches_string_similarity_of_joined_text(self):
        a = ["Brown the beef.", "Simmer for two hours."]
        b = ["Brown the beef.", "Simmer for three hours."]
        expected = string_similarity(" ".join(a), " ".join(b))
        assert instruction_similarity(a, b) == expected
        assert 0.6 < instruction_similarity(a, b) < 1.0
