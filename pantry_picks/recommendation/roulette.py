"""Random-pick wheel: loose candidate filter, wheel layout and spin.

The roulette pool ignores scoring entirely. Every constraint is optional,
unlike the shortlist filter which requires both meal time and diet type.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from pantry_picks.data_layer.models import MEAL_TIME_ANY, Recipe
from pantry_picks.data_layer.preferences import RouletteSettings

logger = logging.getLogger(__name__)

FULL_TURNS_DEGREES = 720


class WheelMode(str, Enum):
    """Where the picked meal comes from."""

    HOME = "home"  # cook it yourself: catalog recipes and custom dishes only
    TAKEOUT = "takeout"  # also offer delivery options


@dataclass(frozen=True)
class RouletteRequest:
    """Inputs for one wheel spin."""

    meal_time: str = MEAL_TIME_ANY
    diet_type: Optional[str] = None
    taste_preference: Optional[str] = None
    mode: str = WheelMode.HOME.value
    custom_dishes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SpinResult:
    """Outcome of a spin over a padded wheel."""

    index: int  # Winning segment
    choice: str  # Dish name on that segment
    rotation_degrees: int  # Final wheel rotation for the animation
    options: Tuple[str, ...] = field(default_factory=tuple)
    pool_size: int = 0  # Catalog recipes that passed the filter
    recipe_id: Optional[str] = None  # Set when the segment is a catalog recipe


def roulette_pool(
    recipes: Sequence[Recipe],
    meal_time: Optional[str] = MEAL_TIME_ANY,
    diet_type: Optional[str] = None,
    taste_preference: Optional[str] = None,
) -> List[Recipe]:
    """Loosely filter the catalog for a uniform random pick.

    Args:
        recipes: Full catalog
        meal_time: MealTime value, or "any"/None for no constraint
        diet_type: Optional DietType value
        taste_preference: Optional Taste value

    Returns:
        Matching recipes in catalog order (unranked)
    """
    def passes(recipe: Recipe) -> bool:
        time_ok = meal_time in (None, MEAL_TIME_ANY) or meal_time in recipe.meal_time
        diet_ok = not diet_type or diet_type in recipe.diet_type
        taste_ok = not taste_preference or taste_preference in recipe.taste
        return time_ok and diet_ok and taste_ok

    return [recipe for recipe in recipes if passes(recipe)]


def add_custom_dish(dishes: Sequence[str], dish: str) -> Tuple[str, ...]:
    """Return ``dishes`` with a user-entered dish appended.

    Blank names and exact duplicates are ignored.
    """
    dish = dish.strip()
    if not dish or dish in dishes:
        return tuple(dishes)
    return tuple(dishes) + (dish,)


def build_wheel_options(
    pool: Sequence[Recipe],
    mode: str,
    custom_dishes: Sequence[str],
    settings: RouletteSettings,
) -> List[str]:
    """Lay out wheel segments.

    Order: pool titles, delivery options (takeout mode only), custom dishes.
    An empty layout falls back to the configured default dishes; short
    layouts are padded by repeating their own prefix up to
    ``settings.wheel_slots`` segments.
    """
    options = [recipe.title for recipe in pool]
    if mode == WheelMode.TAKEOUT:
        options.extend(settings.delivery_options)
    options.extend(custom_dishes)

    if not options:
        logger.info("No wheel candidates matched, using %d fallback dishes", len(settings.fallback_dishes))
        options = list(settings.fallback_dishes)

    while options and len(options) < settings.wheel_slots:
        options = options + options[: settings.wheel_slots - len(options)]

    return options


def spin_wheel(
    options: Sequence[str],
    rng: Optional[random.Random] = None,
    slot_degrees: int = 45,
) -> SpinResult:
    """Draw one segment uniformly at random.

    Args:
        options: Wheel segments (duplicates weigh their dish accordingly)
        rng: Random source with a ``random()`` method
        slot_degrees: Rotation per segment

    Returns:
        SpinResult with the chosen index and final rotation

    Raises:
        ValueError: If there are no options to spin
    """
    if not options:
        raise ValueError("Cannot spin a wheel with no options")

    rng = rng if rng is not None else random.Random()
    index = min(int(rng.random() * len(options)), len(options) - 1)
    return SpinResult(
        index=index,
        choice=options[index],
        rotation_degrees=FULL_TURNS_DEGREES + index * slot_degrees,
        options=tuple(options),
    )


def spin(
    recipes: Sequence[Recipe],
    request: RouletteRequest,
    settings: Optional[RouletteSettings] = None,
    rng: Optional[random.Random] = None,
) -> SpinResult:
    """Filter the pool, lay out the wheel and spin it."""
    settings = settings or RouletteSettings()
    pool = roulette_pool(recipes, request.meal_time, request.diet_type, request.taste_preference)
    options = build_wheel_options(pool, request.mode, request.custom_dishes, settings)
    result = spin_wheel(options, rng=rng, slot_degrees=settings.slot_degrees)

    # Padding repeats the layout cyclically, so segment i shows laid-out entry i % laid_out.
    laid_out = len(pool) + len(request.custom_dishes)
    if request.mode == WheelMode.TAKEOUT:
        laid_out += len(settings.delivery_options)
    recipe_id = None
    if pool and result.index % laid_out < len(pool):
        recipe_id = pool[result.index % laid_out].id

    return SpinResult(
        index=result.index,
        choice=result.choice,
        rotation_degrees=result.rotation_degrees,
        options=result.options,
        pool_size=len(pool),
        recipe_id=recipe_id,
    )
