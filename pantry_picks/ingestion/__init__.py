"""Ingestion layer for normalizing and suggesting ingredient names."""

from pantry_picks.ingestion.ingredient_normalizer import (
    normalize_name,
    normalized_name_set,
)

from pantry_picks.ingestion.ingredient_suggestions import (
    suggest_ingredients,
    add_ingredient,
    remove_ingredient,
)

__all__ = [
    # Ingredient name normalization
    "normalize_name",
    "normalized_name_set",
    # Ingredient picker helpers
    "suggest_ingredients",
    "add_ingredient",
    "remove_ingredient",
]
