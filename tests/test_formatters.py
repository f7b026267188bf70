"""Unit tests for output formatters."""

import json

import pytest

from pantry_picks.data_layer.models import NutritionFacts, Recipe, RecipeIngredient
from pantry_picks.output.formatters import (
    EMPTY_STATE_MESSAGE,
    format_ingredient_string,
    format_nutrition_breakdown,
    format_recipe_markdown,
    format_recipe_summary,
    format_recommendations_json,
    format_recommendations_json_string,
    format_recommendations_markdown,
    format_spin_markdown,
    recipe_to_dict,
    spin_to_dict,
)
from pantry_picks.recommendation.roulette import SpinResult
from pantry_picks.scoring.recipe_scorer import ScoreBreakdown, ScoredCandidate


@pytest.fixture
def recipe():
    return Recipe(
        id="r005",
        title="Garlic Broccoli with Chicken Breast",
        meal_time=("lunch", "dinner"),
        taste=("light",),
        diet_type=("fitness", "weight-loss"),
        duration_min=20,
        servings=1,
        difficulty="easy",
        tags=("high-protein", "low-carb"),
        nutrition=NutritionFacts(calories=330, protein_g=38),
        ingredients=(
            RecipeIngredient(name="chicken breast", amount="150g"),
            RecipeIngredient(name="black pepper", amount=""),
        ),
        steps=("Slice the chicken", "Stir-fry with broccoli"),
    )


@pytest.fixture
def candidate(recipe):
    breakdown = ScoreBreakdown(ingredient=5.0, diet=4.0, taste=0.0, duration=2.0, jitter=0.25)
    return ScoredCandidate(recipe=recipe, score=breakdown.total, breakdown=breakdown)


class TestFormatIngredientString:
    def test_with_amount(self):
        assert format_ingredient_string(RecipeIngredient(name="egg", amount="2")) == "egg - 2"

    def test_without_amount(self):
        assert format_ingredient_string(RecipeIngredient(name="salt", amount="")) == "salt"


class TestRecipeFormatting:
    def test_nutrition_breakdown(self):
        text = format_nutrition_breakdown(NutritionFacts(calories=330.4, protein_g=38), indent="  ")
        assert text == "  **Calories:** 330 kcal\n  **Protein:** 38.0g"

    def test_summary(self, recipe):
        summary = format_recipe_summary(recipe)
        assert summary == (
            "Garlic Broccoli with Chicken Breast | 20 min | serves 1 | easy (high-protein, low-carb)"
        )

    def test_markdown_detail(self, recipe):
        md = format_recipe_markdown(recipe)
        assert md.startswith("# Garlic Broccoli with Chicken Breast")
        assert "**Meal Time:** lunch, dinner" in md
        assert "**Diet:** fitness, weight-loss" in md
        assert "**Tags:** high-protein, low-carb" in md
        assert "- chicken breast - 150g" in md
        assert "- black pepper" in md
        assert "1. Slice the chicken" in md
        assert "2. Stir-fry with broccoli" in md

    def test_recipe_to_dict(self, recipe):
        data = recipe_to_dict(recipe)
        assert data["id"] == "r005"
        assert data["meal_time"] == ["lunch", "dinner"]
        assert data["nutrition"] == {"calories": 330, "protein_g": 38}
        assert data["ingredients"][0] == {"name": "chicken breast", "amount": "150g", "display": "chicken breast - 150g"}
        assert data["image"] is None
        json.dumps(data)


class TestRecommendationFormatting:
    def test_markdown_list(self, candidate):
        md = format_recommendations_markdown([candidate])
        assert "1. Garlic Broccoli with Chicken Breast" in md
        assert "[id: r005]" in md

    def test_markdown_empty_state(self):
        assert EMPTY_STATE_MESSAGE in format_recommendations_markdown([])

    def test_json(self, candidate):
        data = format_recommendations_json([candidate])
        assert data["count"] == 1
        assert data["recipes"][0]["score"] == 11.25
        assert data["recipes"][0]["base_score"] == 11.0
        assert "message" not in data

    def test_json_empty(self):
        assert format_recommendations_json([]) == {"recipes": [], "count": 0, "message": EMPTY_STATE_MESSAGE}

    def test_json_string(self, candidate):
        parsed = json.loads(format_recommendations_json_string([candidate]))
        assert parsed["recipes"][0]["title"] == "Garlic Broccoli with Chicken Breast"


class TestSpinFormatting:
    @pytest.fixture
    def result(self):
        return SpinResult(index=2, choice="Mapo Tofu", rotation_degrees=810,
                          options=("A", "B", "Mapo Tofu", "C"), pool_size=3)

    def test_spin_to_dict(self, result):
        assert spin_to_dict(result) == {
            "choice": "Mapo Tofu",
            "index": 2,
            "rotation_degrees": 810,
            "options": ["A", "B", "Mapo Tofu", "C"],
            "pool_size": 3,
            "recipe_id": None,
        }

    def test_spin_markdown_without_recipe(self, result):
        md = format_spin_markdown(result)
        assert "**Mapo Tofu**" in md
        assert "4 wheel slots (3 catalog matches)" in md

    def test_spin_markdown_with_recipe(self, result, recipe):
        md = format_spin_markdown(result, recipe)
        assert "# Garlic Broccoli with Chicken Breast" in md
