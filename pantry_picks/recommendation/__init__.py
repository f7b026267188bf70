"""Recommendation shortlist and random-pick wheel."""

from pantry_picks.recommendation.recommender import (
    RecommendationRequest,
    filter_candidates,
    rank_candidates,
    recommend,
)
from pantry_picks.recommendation.roulette import (
    RouletteRequest,
    SpinResult,
    WheelMode,
    add_custom_dish,
    build_wheel_options,
    roulette_pool,
    spin,
    spin_wheel,
)

__all__ = [
    "RecommendationRequest",
    "filter_candidates",
    "rank_candidates",
    "recommend",
    "RouletteRequest",
    "SpinResult",
    "WheelMode",
    "add_custom_dish",
    "build_wheel_options",
    "roulette_pool",
    "spin",
    "spin_wheel",
]
