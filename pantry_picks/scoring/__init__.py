"""Scoring module for recipe recommendations."""

from .recipe_scorer import (
    RecipeScorer,
    ScoringWeights,
    ScoreBreakdown,
    ScoredCandidate,
    diet_bonus,
)

__all__ = [
    "RecipeScorer",
    "ScoringWeights",
    "ScoreBreakdown",
    "ScoredCandidate",
    "diet_bonus",
]
