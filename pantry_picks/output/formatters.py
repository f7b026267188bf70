"""Formatters for recommendation output (JSON and Markdown)."""

import json
from typing import Any, Dict, List, Optional, Sequence

from pantry_picks.data_layer.models import NutritionFacts, Recipe, RecipeIngredient
from pantry_picks.recommendation.roulette import SpinResult
from pantry_picks.scoring.recipe_scorer import ScoredCandidate

EMPTY_STATE_MESSAGE = "No recipes match these filters. Try another meal time or diet goal."


def format_ingredient_string(ingredient: RecipeIngredient) -> str:
    """Format an ingredient line (e.g., "egg - 2").

    Args:
        ingredient: RecipeIngredient object

    Returns:
        "name - amount", or just the name when no amount is given
    """
    if ingredient.amount:
        return f"{ingredient.name} - {ingredient.amount}"
    return ingredient.name


def format_nutrition_breakdown(nutrition: NutritionFacts, indent: str = "") -> str:
    """Format nutrition facts as a readable breakdown.

    Args:
        nutrition: NutritionFacts object
        indent: Optional indentation prefix

    Returns:
        Formatted string with calories and protein
    """
    lines = [
        f"{indent}**Calories:** {nutrition.calories:.0f} kcal",
        f"{indent}**Protein:** {nutrition.protein_g:.1f}g",
    ]
    return "\n".join(lines)


def format_recipe_summary(recipe: Recipe) -> str:
    """One-line card summary: title, time, servings, difficulty, tags."""
    parts = [
        recipe.title,
        f"{recipe.duration_min} min",
        f"serves {recipe.servings}",
    ]
    if recipe.difficulty:
        parts.append(recipe.difficulty)
    summary = " | ".join(parts)
    if recipe.tags:
        summary += f" ({', '.join(recipe.tags)})"
    return summary


def format_recipe_markdown(recipe: Recipe) -> str:
    """Format the full recipe detail view as Markdown.

    Args:
        recipe: Recipe to render

    Returns:
        Markdown with overview, tags, nutrition, ingredients and steps
    """
    lines = [f"# {recipe.title}", ""]

    lines.append(f"**Meal Time:** {', '.join(recipe.meal_time)}")
    lines.append(f"**Taste:** {', '.join(recipe.taste)}")
    lines.append(f"**Diet:** {', '.join(recipe.diet_type)}")
    if recipe.difficulty:
        lines.append(f"**Difficulty:** {recipe.difficulty}")
    lines.append(f"**Time:** {recipe.duration_min} minutes")
    lines.append(f"**Servings:** {recipe.servings}")
    lines.append("")

    if recipe.tags:
        lines.append(f"**Tags:** {', '.join(recipe.tags)}")
        lines.append("")

    lines.append("## Nutrition")
    lines.append(format_nutrition_breakdown(recipe.nutrition))
    lines.append("")

    lines.append("## Ingredients")
    for ingredient in recipe.ingredients:
        lines.append(f"- {format_ingredient_string(ingredient)}")
    lines.append("")

    if recipe.steps:
        lines.append("## Steps")
        for step_idx, step in enumerate(recipe.steps, 1):
            lines.append(f"{step_idx}. {step}")
        lines.append("")

    return "\n".join(lines)


def format_recommendations_markdown(candidates: Sequence[ScoredCandidate]) -> str:
    """Format a ranked shortlist as Markdown.

    An empty shortlist renders the empty-state hint instead of a list.
    """
    lines = ["# Recommended Recipes", ""]
    if not candidates:
        lines.append(EMPTY_STATE_MESSAGE)
        lines.append("")
        return "\n".join(lines)

    for rank, candidate in enumerate(candidates, 1):
        lines.append(f"{rank}. {format_recipe_summary(candidate.recipe)} [id: {candidate.recipe.id}]")
    lines.append("")
    return "\n".join(lines)


def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    """Convert a recipe to a JSON-ready dictionary."""
    return {
        "id": recipe.id,
        "title": recipe.title,
        "meal_time": list(recipe.meal_time),
        "taste": list(recipe.taste),
        "diet_type": list(recipe.diet_type),
        "duration_min": recipe.duration_min,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "tags": list(recipe.tags),
        "nutrition": {
            "calories": recipe.nutrition.calories,
            "protein_g": recipe.nutrition.protein_g,
        },
        "ingredients": [
            {
                "name": ing.name,
                "amount": ing.amount,
                "display": format_ingredient_string(ing),
            }
            for ing in recipe.ingredients
        ],
        "steps": list(recipe.steps),
        "image": recipe.image,
    }


def candidate_to_dict(candidate: ScoredCandidate) -> Dict[str, Any]:
    data = recipe_to_dict(candidate.recipe)
    data["score"] = round(candidate.score, 3)
    data["base_score"] = candidate.breakdown.base_score
    return data


def format_recommendations_json(candidates: Sequence[ScoredCandidate]) -> Dict[str, Any]:
    """Format a ranked shortlist as a JSON-ready dictionary (for API usage).

    Args:
        candidates: Scored candidates, highest first

    Returns:
        {"recipes": [...], "count": n, "message": optional empty-state hint}
    """
    result: Dict[str, Any] = {
        "recipes": [candidate_to_dict(c) for c in candidates],
        "count": len(candidates),
    }
    if not candidates:
        result["message"] = EMPTY_STATE_MESSAGE
    return result


def format_recommendations_json_string(candidates: Sequence[ScoredCandidate], indent: int = 2) -> str:
    """Format a ranked shortlist as a JSON string.

    Args:
        candidates: Scored candidates, highest first
        indent: JSON indentation (default: 2)

    Returns:
        JSON string
    """
    return json.dumps(format_recommendations_json(candidates), indent=indent, ensure_ascii=False)


def spin_to_dict(result: SpinResult) -> Dict[str, Any]:
    return {
        "choice": result.choice,
        "index": result.index,
        "rotation_degrees": result.rotation_degrees,
        "options": list(result.options),
        "pool_size": result.pool_size,
        "recipe_id": result.recipe_id,
    }


def format_spin_markdown(result: SpinResult, recipe: Optional[Recipe] = None) -> str:
    """Format a wheel spin; appends the recipe detail when the pick is a catalog recipe."""
    lines: List[str] = ["# Today's Pick", "", f"**{result.choice}**", ""]
    lines.append(f"Drawn from {len(result.options)} wheel slots ({result.pool_size} catalog matches).")
    lines.append("")
    if recipe is not None:
        lines.append(format_recipe_markdown(recipe))
    return "\n".join(lines)
