"""Data models for the recipe recommender."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class MealTime(str, Enum):
    """Meal-time tags a recipe can be applicable to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    LATE_NIGHT = "late-night"


class Taste(str, Enum):
    """Flavor-profile tags."""

    LIGHT = "light"
    SPICY = "spicy"
    SWEET_SOUR = "sweet-sour"
    SAVORY = "savory"


class DietType(str, Enum):
    """Diet goals used for hard filtering and bonus scoring."""

    NORMAL = "normal"
    WEIGHT_LOSS = "weight-loss"
    FITNESS = "fitness"


# Roulette meal-time value meaning "no meal-time constraint"
MEAL_TIME_ANY = "any"

MEAL_TIMES = tuple(m.value for m in MealTime)
TASTES = tuple(t.value for t in Taste)
DIET_TYPES = tuple(d.value for d in DietType)


@dataclass(frozen=True)
class RecipeIngredient:
    """An ingredient line as shown on a recipe card."""

    name: str  # Display name, matched against user selections after normalization
    amount: str  # Free-form amount (e.g., "2", "200g", "a pinch")


@dataclass(frozen=True)
class NutritionFacts:
    """Per-serving nutrition shown on the recipe detail view."""

    calories: float
    protein_g: float


@dataclass(frozen=True)
class Recipe:
    """Represents a catalog recipe.

    Tag-valued fields are tuples in catalog order; membership tests
    (``"lunch" in recipe.meal_time``) behave like set lookups.
    """

    id: str  # Unique identifier
    title: str
    meal_time: Tuple[str, ...]  # MealTime values
    taste: Tuple[str, ...]  # Taste values
    diet_type: Tuple[str, ...]  # DietType values
    duration_min: int  # Preparation time in minutes
    servings: int
    difficulty: str
    tags: Tuple[str, ...]  # e.g. "high-protein", "low-oil-low-salt", "quick-dish"
    nutrition: NutritionFacts
    ingredients: Tuple[RecipeIngredient, ...]
    steps: Tuple[str, ...]
    image: Optional[str] = None
