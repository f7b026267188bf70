"""Output formatting for recipes, shortlists and wheel spins."""

from pantry_picks.output.formatters import (
    format_ingredient_string,
    format_nutrition_breakdown,
    format_recipe_summary,
    format_recipe_markdown,
    format_recommendations_markdown,
    format_recommendations_json,
    format_recommendations_json_string,
    format_spin_markdown,
    recipe_to_dict,
    spin_to_dict,
)

__all__ = [
    "format_ingredient_string",
    "format_nutrition_breakdown",
    "format_recipe_summary",
    "format_recipe_markdown",
    "format_recommendations_markdown",
    "format_recommendations_json",
    "format_recommendations_json_string",
    "format_spin_markdown",
    "recipe_to_dict",
    "spin_to_dict",
]
