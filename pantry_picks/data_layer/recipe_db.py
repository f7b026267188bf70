"""Recipe database for loading the recipe catalog from JSON."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pantry_picks.data_layer.exceptions import CatalogError, RecipeValidationError
from pantry_picks.data_layer.models import (
    DIET_TYPES,
    MEAL_TIMES,
    TASTES,
    NutritionFacts,
    Recipe,
    RecipeIngredient,
)

logger = logging.getLogger(__name__)


class RecipeDB:
    """Read-only catalog of recipes loaded from JSON."""

    def __init__(self, json_path: str):
        """Initialize recipe database from JSON file.

        Args:
            json_path: Path to JSON file containing {"recipes": [...]}

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            CatalogError: If the file is not a {"recipes": [...]} document
            RecipeValidationError: If a record breaks a catalog invariant
        """
        self.json_path = Path(json_path)
        self._recipes: List[Recipe] = []
        self._load_recipes()

    def _load_recipes(self):
        """Load and validate recipes from JSON file."""
        with open(self.json_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict) or not isinstance(data.get("recipes", []), list):
            raise CatalogError(f"{self.json_path}: expected an object with a \"recipes\" list")

        seen_ids = set()
        for position, recipe_data in enumerate(data.get("recipes", [])):
            if not isinstance(recipe_data, dict):
                raise CatalogError(f"{self.json_path}: recipe #{position} is not an object")
            recipe = self._parse_recipe(recipe_data)
            if recipe.id in seen_ids:
                raise RecipeValidationError(recipe.id, "id", "duplicate recipe id")
            seen_ids.add(recipe.id)
            self._recipes.append(recipe)

        logger.info("Loaded %d recipes from %s", len(self._recipes), self.json_path)

    def _parse_recipe(self, recipe_data: Dict[str, Any]) -> Recipe:
        """Parse a single recipe from dictionary data.

        Accepts the camelCase keys of the web catalog (mealTime, dietType,
        durationMin, nutrition.cal, nutrition.proteinGrams) as well as
        snake_case equivalents.

        Args:
            recipe_data: Dictionary containing recipe data

        Returns:
            Recipe object
        """
        recipe_id = str(recipe_data.get("id") or "<unknown>")
        if "id" not in recipe_data or not str(recipe_data["id"]).strip():
            raise RecipeValidationError(recipe_id, "id", "missing recipe id")

        title = _field(recipe_data, recipe_id, "title")

        meal_time = self._parse_tags(recipe_data, recipe_id, ("mealTime", "meal_time"), MEAL_TIMES)
        taste = self._parse_tags(recipe_data, recipe_id, ("taste",), TASTES)
        diet_type = self._parse_tags(recipe_data, recipe_id, ("dietType", "diet_type"), DIET_TYPES)

        duration = _positive_int(
            _field(recipe_data, recipe_id, "durationMin", "duration_min"), recipe_id, "durationMin"
        )
        servings = _positive_int(_field(recipe_data, recipe_id, "servings"), recipe_id, "servings")

        nutrition = self._parse_nutrition(_field(recipe_data, recipe_id, "nutrition"), recipe_id)

        ingredients = tuple(
            self._parse_ingredient(ing_data, recipe_id)
            for ing_data in _list_field(recipe_data, recipe_id, "ingredients")
        )

        return Recipe(
            id=recipe_id,
            title=str(title),
            meal_time=meal_time,
            taste=taste,
            diet_type=diet_type,
            duration_min=duration,
            servings=servings,
            difficulty=str(recipe_data.get("difficulty", "")),
            tags=tuple(str(tag) for tag in _list_field(recipe_data, recipe_id, "tags")),
            nutrition=nutrition,
            ingredients=ingredients,
            steps=tuple(str(step) for step in _list_field(recipe_data, recipe_id, "steps")),
            image=recipe_data.get("image"),
        )

    def _parse_tags(
        self,
        recipe_data: Dict[str, Any],
        recipe_id: str,
        keys: Sequence[str],
        allowed: Sequence[str],
    ) -> Tuple[str, ...]:
        """Parse a tag-valued field, enforcing non-empty and known values."""
        values = _field(recipe_data, recipe_id, *keys)
        if not isinstance(values, list) or not values:
            raise RecipeValidationError(recipe_id, keys[0], "must be a non-empty list")

        tags = tuple(str(v) for v in values)
        unknown = [t for t in tags if t not in allowed]
        if unknown:
            raise RecipeValidationError(
                recipe_id, keys[0], f"unknown value(s) {unknown}, expected one of {list(allowed)}"
            )
        return tags

    def _parse_nutrition(self, nutrition_data: Any, recipe_id: str) -> NutritionFacts:
        """Parse per-serving nutrition; both values are required."""
        if not isinstance(nutrition_data, dict):
            raise RecipeValidationError(recipe_id, "nutrition", "must be an object")
        calories = _field(nutrition_data, recipe_id, "cal", "calories")
        protein = _field(nutrition_data, recipe_id, "proteinGrams", "protein_g")
        try:
            return NutritionFacts(calories=float(calories), protein_g=float(protein))
        except (TypeError, ValueError):
            raise RecipeValidationError(
                recipe_id, "nutrition", f"expected numbers, got {calories!r} and {protein!r}"
            )

    def _parse_ingredient(self, ing_data: Any, recipe_id: str) -> RecipeIngredient:
        """Parse a single ingredient line."""
        if not isinstance(ing_data, dict):
            raise RecipeValidationError(recipe_id, "ingredients", f"expected an object, got {ing_data!r}")
        name = str(ing_data.get("name", "")).strip()
        if not name:
            raise RecipeValidationError(recipe_id, "ingredients", "ingredient without a name")
        return RecipeIngredient(name=name, amount=str(ing_data.get("amount", "")))

    def get_all_recipes(self) -> List[Recipe]:
        """Get all recipes in the database.

        Returns:
            List of all Recipe objects
        """
        return self._recipes.copy()

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get a recipe by its ID.

        Args:
            recipe_id: Unique recipe identifier

        Returns:
            Recipe object if found, None otherwise
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None


def _field(recipe_data: Dict[str, Any], recipe_id: str, *keys: str) -> Any:
    for key in keys:
        if key in recipe_data:
            return recipe_data[key]
    raise RecipeValidationError(recipe_id, keys[0], "missing required field")


def _list_field(recipe_data: Dict[str, Any], recipe_id: str, key: str) -> List[Any]:
    values = recipe_data.get(key, [])
    if values is None:
        return []
    if not isinstance(values, list):
        raise RecipeValidationError(recipe_id, key, f"must be a list, got {type(values).__name__}")
    return values


def _positive_int(value: Any, recipe_id: str, field: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise RecipeValidationError(recipe_id, field, f"expected an integer, got {value!r}")
    if number <= 0:
        raise RecipeValidationError(recipe_id, field, f"must be positive, got {number}")
    return number
