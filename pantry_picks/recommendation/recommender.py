"""Strict filter and ranking for the recommendation shortlist."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pantry_picks.data_layer.models import Recipe
from pantry_picks.scoring.recipe_scorer import RecipeScorer, ScoredCandidate

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 8


@dataclass(frozen=True)
class RecommendationRequest:
    """Inputs for one recommendation call."""

    meal_time: str  # MealTime value, required
    diet_type: str  # DietType value, required
    selected_ingredients: Tuple[str, ...] = ()
    taste_preference: Optional[str] = None
    top_n: int = DEFAULT_TOP_N


def filter_candidates(
    recipes: Sequence[Recipe], meal_time: str, diet_type: str
) -> List[Recipe]:
    """Keep recipes tagged with both the meal time and the diet type.

    Args:
        recipes: Catalog to filter
        meal_time: Required MealTime value
        diet_type: Required DietType value

    Returns:
        Matching recipes in catalog order
    """
    return [
        recipe
        for recipe in recipes
        if meal_time in recipe.meal_time and diet_type in recipe.diet_type
    ]


def rank_candidates(
    recipes: Sequence[Recipe],
    request: RecommendationRequest,
    scorer: Optional[RecipeScorer] = None,
) -> List[ScoredCandidate]:
    """Filter, score and sort; truncate to the requested count.

    Ties on the integer terms are broken by the scorer's jitter, so their
    relative order varies between calls.

    Args:
        recipes: Full catalog
        request: Recommendation inputs
        scorer: Optional scorer (inject one with a fixed random source for
            reproducible ordering)

    Returns:
        At most max(1, request.top_n) candidates, highest score first
    """
    scorer = scorer or RecipeScorer()
    filtered = filter_candidates(recipes, request.meal_time, request.diet_type)

    scored = [
        scorer.score_candidate(
            recipe,
            request.selected_ingredients,
            request.diet_type,
            request.taste_preference,
        )
        for recipe in filtered
    ]
    scored.sort(key=lambda c: c.score, reverse=True)

    limit = max(1, request.top_n)
    logger.debug(
        "recommend meal_time=%s diet_type=%s: %d of %d recipes passed the filter, returning %d",
        request.meal_time, request.diet_type, len(filtered), len(recipes), min(limit, len(scored)),
    )
    return scored[:limit]


def recommend(
    recipes: Sequence[Recipe],
    request: RecommendationRequest,
    scorer: Optional[RecipeScorer] = None,
) -> List[Recipe]:
    """Ranked recipe shortlist; empty when nothing passes the filter."""
    return [candidate.recipe for candidate in rank_candidates(recipes, request, scorer)]
