"""Tests for ingredient name normalization and the ingredient picker helpers."""

import pytest

from pantry_picks.ingestion.ingredient_normalizer import normalize_name, normalized_name_set
from pantry_picks.ingestion.ingredient_suggestions import (
    add_ingredient,
    remove_ingredient,
    suggest_ingredients,
)


class TestNormalizeName:
    """Tests for normalize_name."""

    @pytest.mark.parametrize("raw,expected", [
        ("Egg", "egg"),
        ("  tomato  ", "tomato"),
        ("Green Pepper", "greenpepper"),
        ("green\tpepper\n", "greenpepper"),
        ("SOY  SAUCE", "soysauce"),
        ("", ""),
        ("   ", ""),
    ])
    def test_strips_whitespace_and_lowercases(self, raw, expected):
        assert normalize_name(raw) == expected

    def test_idempotent(self):
        once = normalize_name(" Olive Oil ")
        assert normalize_name(once) == once

    def test_keeps_punctuation(self):
        assert normalize_name("Bone-In Pork") == "bone-inpork"

    def test_name_set(self):
        assert normalized_name_set(["Egg", " egg ", "Soy Sauce"]) == {"egg", "soysauce"}


COMMON = ("egg", "tomato", "green pepper", "soy sauce", "oyster sauce")


class TestSuggestIngredients:
    def test_empty_term_returns_all_unselected(self):
        assert suggest_ingredients("", ["egg"], COMMON) == ["tomato", "green pepper", "soy sauce", "oyster sauce"]

    def test_substring_match(self):
        assert suggest_ingredients("sauce", [], COMMON) == ["soy sauce", "oyster sauce"]

    def test_match_ignores_spacing_and_case(self):
        assert suggest_ingredients("Green P", [], COMMON) == ["green pepper"]

    def test_selected_excluded(self):
        assert suggest_ingredients("sauce", ["Soy Sauce"], COMMON) == ["oyster sauce"]

    def test_no_match(self):
        assert suggest_ingredients("durian", [], COMMON) == []


class TestSelectionHelpers:
    def test_add(self):
        assert add_ingredient((), " egg ") == ("egg",)
        assert add_ingredient(("egg",), "tomato") == ("egg", "tomato")

    def test_add_ignores_blank_and_duplicates(self):
        assert add_ingredient(("egg",), "  ") == ("egg",)
        assert add_ingredient(("soy sauce",), "Soy  Sauce") == ("soy sauce",)

    def test_remove(self):
        assert remove_ingredient(("egg", "tomato"), "Egg") == ("tomato",)
        assert remove_ingredient(("egg",), "tofu") == ("egg",)
