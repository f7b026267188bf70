"""Preferences loader for application defaults from YAML."""
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from pantry_picks.data_layer.exceptions import PreferencesError
from pantry_picks.data_layer.models import DIET_TYPES, MEAL_TIMES, DietType, MealTime


DEFAULT_FALLBACK_DISHES: Tuple[str, ...] = (
    "Tomato Scrambled Eggs",
    "Shredded Potato with Green Pepper",
    "Red-Braised Pork Belly",
    "Steamed Fish",
    "Mapo Tofu",
    "Kung Pao Chicken",
    "Fish-Fragrant Shredded Pork",
    "Sweet and Sour Spare Ribs",
)

DEFAULT_DELIVERY_OPTIONS: Tuple[str, ...] = (
    "Burger Combo",
    "Fried Chicken Bucket",
    "Pizza Delivery",
    "Sushi Platter",
    "Chinese Fast Food",
    "Barbecue Set",
    "Hot Pot Delivery",
    "Salad Bowl",
)

DEFAULT_COMMON_INGREDIENTS: Tuple[str, ...] = (
    "egg", "tomato", "pork", "tofu", "shrimp", "corn", "green pepper", "onion",
    "broccoli", "carrot", "pumpkin", "shiitake", "rice", "whole wheat noodles", "oats",
    "scallion", "minced garlic", "salt", "sugar", "soy sauce", "oyster sauce",
    "lemon juice", "black pepper", "olive oil",
)


@dataclass(frozen=True)
class RouletteSettings:
    """Wheel layout and fallback content."""

    wheel_slots: int = 8  # Minimum number of wheel segments
    slot_degrees: int = 45  # Rotation per segment (360 / wheel_slots)
    fallback_dishes: Tuple[str, ...] = DEFAULT_FALLBACK_DISHES
    delivery_options: Tuple[str, ...] = DEFAULT_DELIVERY_OPTIONS


@dataclass(frozen=True)
class AppPreferences:
    """Application defaults for the CLI and API."""

    default_meal_time: str = MealTime.LUNCH.value
    default_diet_type: str = DietType.NORMAL.value
    top_n: int = 8
    roulette: RouletteSettings = field(default_factory=RouletteSettings)
    common_ingredients: Tuple[str, ...] = DEFAULT_COMMON_INGREDIENTS


class PreferencesLoader:
    """Loader for application preferences from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize preferences loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing preferences
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> AppPreferences:
        """Load preferences from YAML file.

        Sections that are absent keep their AppPreferences defaults.

        Returns:
            AppPreferences object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            PreferencesError: If a value is out of range or unknown
        """
        with open(self.yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise PreferencesError(f"{self.yaml_path}: top level must be a mapping")

        base = AppPreferences()
        defaults = _section(data, "defaults")
        roulette = _section(data, "roulette")
        ingredients = _section(data, "ingredients")

        meal_time = str(defaults.get("meal_time", base.default_meal_time))
        if meal_time not in MEAL_TIMES:
            raise PreferencesError(f"Unknown default meal_time '{meal_time}', expected one of {list(MEAL_TIMES)}")

        diet_type = str(defaults.get("diet_type", base.default_diet_type))
        if diet_type not in DIET_TYPES:
            raise PreferencesError(f"Unknown default diet_type '{diet_type}', expected one of {list(DIET_TYPES)}")

        top_n = _int_setting(defaults, "top_n", base.top_n)
        if top_n < 1:
            raise PreferencesError(f"defaults.top_n must be at least 1, got {top_n}")

        roulette_settings = self._parse_roulette(roulette, base.roulette)

        common = _str_tuple(ingredients, "common", base.common_ingredients)

        return AppPreferences(
            default_meal_time=meal_time,
            default_diet_type=diet_type,
            top_n=top_n,
            roulette=roulette_settings,
            common_ingredients=common,
        )

    def _parse_roulette(self, section: Dict[str, Any], base: RouletteSettings) -> RouletteSettings:
        wheel_slots = _int_setting(section, "wheel_slots", base.wheel_slots)
        if wheel_slots < 1:
            raise PreferencesError(f"roulette.wheel_slots must be at least 1, got {wheel_slots}")

        fallback = _str_tuple(section, "fallback_dishes", base.fallback_dishes)
        if not fallback:
            raise PreferencesError("roulette.fallback_dishes must not be empty")

        return RouletteSettings(
            wheel_slots=wheel_slots,
            slot_degrees=_int_setting(section, "slot_degrees", base.slot_degrees),
            fallback_dishes=fallback,
            delivery_options=_str_tuple(section, "delivery_options", base.delivery_options),
        )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise PreferencesError(f"'{name}' must be a mapping")
    return section


def _int_setting(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise PreferencesError(f"'{key}' must be an integer, got {value!r}")


def _str_tuple(section: Dict[str, Any], key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if key not in section or section[key] is None:
        return default
    values = section[key]
    if not isinstance(values, list):
        raise PreferencesError(f"'{key}' must be a list, got {type(values).__name__}")
    return tuple(str(item) for item in values)
