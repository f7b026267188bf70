"""Recipe scoring for ingredient-driven recommendations."""

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from pantry_picks.data_layer.models import DietType, Recipe
from pantry_picks.ingestion.ingredient_normalizer import normalize_name, normalized_name_set


FITNESS_PROTEIN_TAG = "high-protein"
FITNESS_FIBER_TAG = "high-fiber"
WEIGHT_LOSS_LIGHT_TAGS = frozenset({"low-oil-low-salt", "low-calorie", "low-carb"})
WEIGHT_LOSS_QUICK_TAG = "quick-dish"


def diet_bonus(tags: Iterable[str], diet_type: str) -> int:
    """Bonus points for tags that support a diet goal.

    fitness: +4 for high-protein, +1 for high-fiber.
    weight-loss: +4 for any light-cooking tag (once), +1 for quick-dish.
    normal and anything else: 0.

    Args:
        tags: Recipe tag collection
        diet_type: DietType value

    Returns:
        Integer bonus in [0, 5]
    """
    tag_set = set(tags)
    bonus = 0
    if diet_type == DietType.FITNESS:
        if FITNESS_PROTEIN_TAG in tag_set:
            bonus += 4
        if FITNESS_FIBER_TAG in tag_set:
            bonus += 1
    elif diet_type == DietType.WEIGHT_LOSS:
        if tag_set & WEIGHT_LOSS_LIGHT_TAGS:
            bonus += 4
        if WEIGHT_LOSS_QUICK_TAG in tag_set:
            bonus += 1
    return bonus


@dataclass(frozen=True)
class ScoringWeights:
    """Point values for each scoring term."""
    ingredient_hit: float = 5.0      # per matched recipe ingredient
    no_selection_base: float = 2.0   # flat base when nothing is selected
    taste_hit: float = 3.0           # taste preference present on recipe
    quick_bonus: float = 2.0         # 0 < duration <= quick_max_min
    short_bonus: float = 1.0         # duration <= short_max_min
    long_penalty: float = 1.0        # duration > long_min_min
    quick_max_min: int = 20
    short_max_min: int = 30
    long_min_min: int = 45
    jitter_max: float = 0.5          # jitter drawn from [0, jitter_max)

    def __post_init__(self):
        """Validate weights are non-negative and jitter cannot reorder integer scores."""
        weights = [self.ingredient_hit, self.no_selection_base, self.taste_hit,
                   self.quick_bonus, self.short_bonus, self.long_penalty,
                   self.jitter_max]
        if any(w < 0 for w in weights):
            raise ValueError("All scoring weights must be non-negative")

        if self.jitter_max >= 1.0:
            raise ValueError(f"jitter_max must be below 1.0, got {self.jitter_max}")

        if not self.quick_max_min <= self.short_max_min <= self.long_min_min:
            raise ValueError("Duration bands must satisfy quick <= short <= long")


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-term contributions to a recipe score."""
    ingredient: float
    diet: float
    taste: float
    duration: float
    jitter: float

    @property
    def base_score(self) -> float:
        """Score without the tie-breaking jitter."""
        return self.ingredient + self.diet + self.taste + self.duration

    @property
    def total(self) -> float:
        return self.base_score + self.jitter


@dataclass(frozen=True)
class ScoredCandidate:
    """A recipe paired with its score for one ranking call."""
    recipe: Recipe
    score: float
    breakdown: ScoreBreakdown


class RecipeScorer:
    """Scores recipes against selected ingredients, diet goal and taste."""

    def __init__(self,
                 weights: Optional[ScoringWeights] = None,
                 rng: Optional[random.Random] = None):
        """Initialize recipe scorer.

        Args:
            weights: Optional custom scoring weights
            rng: Random source for tie-break jitter; anything with a
                ``random()`` method returning floats in [0, 1)
        """
        self.weights = weights or ScoringWeights()
        self.rng = rng if rng is not None else random.Random()

    def score_recipe(self,
                     recipe: Recipe,
                     selected_ingredients: Sequence[str],
                     diet_type: str,
                     taste_preference: Optional[str] = None) -> float:
        """Score a recipe for the current selection.

        Args:
            recipe: Recipe to score
            selected_ingredients: Ingredient names chosen by the user (may be empty)
            diet_type: DietType value
            taste_preference: Optional Taste value

        Returns:
            Score (higher is better); may be negative for long recipes
        """
        return self.breakdown(recipe, selected_ingredients, diet_type, taste_preference).total

    def score_candidate(self,
                        recipe: Recipe,
                        selected_ingredients: Sequence[str],
                        diet_type: str,
                        taste_preference: Optional[str] = None) -> ScoredCandidate:
        breakdown = self.breakdown(recipe, selected_ingredients, diet_type, taste_preference)
        return ScoredCandidate(recipe=recipe, score=breakdown.total, breakdown=breakdown)

    def breakdown(self,
                  recipe: Recipe,
                  selected_ingredients: Sequence[str],
                  diet_type: str,
                  taste_preference: Optional[str] = None) -> ScoreBreakdown:
        """Compute every scoring term, jitter included.

        Terms are evaluated in a fixed order so the random source is
        consumed exactly once per recipe.
        """
        return ScoreBreakdown(
            ingredient=self._score_ingredient_match(recipe, selected_ingredients),
            diet=float(diet_bonus(recipe.tags, diet_type)),
            taste=self._score_taste_match(recipe, taste_preference),
            duration=self._score_duration(recipe.duration_min),
            jitter=self.rng.random() * self.weights.jitter_max,
        )

    def _score_ingredient_match(self,
                                recipe: Recipe,
                                selected_ingredients: Sequence[str]) -> float:
        """Points per recipe ingredient found in the selection.

        An empty selection earns the flat base instead, so an unconstrained
        search doesn't collapse to all-zero scores.
        """
        if not selected_ingredients:
            return self.weights.no_selection_base

        selected = normalized_name_set(selected_ingredients)
        hits = sum(1 for ing in recipe.ingredients if normalize_name(ing.name) in selected)
        return hits * self.weights.ingredient_hit

    def _score_taste_match(self, recipe: Recipe, taste_preference: Optional[str]) -> float:
        if taste_preference and taste_preference in recipe.taste:
            return self.weights.taste_hit
        return 0.0

    def _score_duration(self, duration_min: int) -> float:
        """Favor quick dishes, mildly penalize long ones.

        The band between short_max_min and long_min_min is neutral, as is a
        non-positive duration.
        """
        w = self.weights
        if duration_min <= 0:
            return 0.0
        if duration_min <= w.quick_max_min:
            return w.quick_bonus
        if duration_min <= w.short_max_min:
            return w.short_bonus
        if duration_min > w.long_min_min:
            return -w.long_penalty
        return 0.0
