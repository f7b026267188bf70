#!/usr/bin/env python3
"""Command-line interface for Pantry Picks recipe recommendations."""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from pantry_picks.data_layer.exceptions import CatalogError, PreferencesError
from pantry_picks.data_layer.models import DIET_TYPES, MEAL_TIME_ANY, MEAL_TIMES, TASTES
from pantry_picks.data_layer.preferences import AppPreferences, PreferencesLoader
from pantry_picks.data_layer.recipe_db import RecipeDB
from pantry_picks.ingestion.ingredient_suggestions import add_ingredient, suggest_ingredients
from pantry_picks.output.formatters import (
    EMPTY_STATE_MESSAGE,
    format_recipe_markdown,
    format_recommendations_json_string,
    format_recommendations_markdown,
    format_spin_markdown,
)
from pantry_picks.recommendation.recommender import RecommendationRequest, rank_candidates
from pantry_picks.recommendation.roulette import RouletteRequest, WheelMode, add_custom_dish, spin
from pantry_picks.scoring.recipe_scorer import RecipeScorer

logger = logging.getLogger(__name__)


def load_preferences(config_path: Path) -> AppPreferences:
    """Load preferences, falling back to built-in defaults if the file is absent."""
    if not config_path.exists():
        logger.info("No preferences file at %s, using defaults", config_path)
        return AppPreferences()
    return PreferencesLoader(str(config_path)).load()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend recipes from the ingredients you have, or spin the wheel to pick one"
    )
    parser.add_argument(
        "--recipes",
        type=str,
        default="data/recipes/recipes.json",
        help="Path to recipes JSON file (default: data/recipes/recipes.json)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/preferences.yaml",
        help="Path to preferences YAML file (default: config/preferences.yaml)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    rec = subparsers.add_parser("recommend", help="Ranked shortlist for a meal time and diet goal")
    rec.add_argument("--meal-time", choices=MEAL_TIMES, help="Meal time (default from preferences)")
    rec.add_argument("--diet-type", choices=DIET_TYPES, help="Diet goal (default from preferences)")
    rec.add_argument(
        "--ingredient", "-i",
        action="append",
        default=[],
        help="Ingredient you have on hand (repeatable)"
    )
    rec.add_argument("--taste", choices=TASTES, help="Optional taste preference")
    rec.add_argument("--top-n", type=int, help="Number of recipes to return (default from preferences)")
    rec.add_argument(
        "--output",
        choices=["markdown", "json"],
        default="markdown",
        help="Output format: markdown (default) or json"
    )
    rec.add_argument("--seed", type=int, help="Seed the tie-break jitter for reproducible output")

    roulette = subparsers.add_parser("spin", help="Spin the random-pick wheel")
    roulette.add_argument(
        "--meal-time",
        choices=(MEAL_TIME_ANY,) + MEAL_TIMES,
        default=MEAL_TIME_ANY,
        help="Meal time filter (default: any)"
    )
    roulette.add_argument("--diet-type", choices=DIET_TYPES, help="Optional diet filter")
    roulette.add_argument("--taste", choices=TASTES, help="Optional taste filter")
    roulette.add_argument(
        "--mode",
        choices=[m.value for m in WheelMode],
        default=WheelMode.HOME.value,
        help="home: cook it yourself; takeout: include delivery options"
    )
    roulette.add_argument(
        "--custom-dish",
        action="append",
        default=[],
        help="Extra dish to put on the wheel (repeatable)"
    )
    roulette.add_argument("--seed", type=int, help="Seed the wheel for a reproducible pick")

    show = subparsers.add_parser("show", help="Show a recipe in full")
    show.add_argument("recipe_id", help="Recipe ID")

    suggest = subparsers.add_parser("suggest", help="Suggest common ingredients")
    suggest.add_argument("term", nargs="?", default="", help="Partial ingredient name")
    suggest.add_argument(
        "--selected",
        action="append",
        default=[],
        help="Ingredient already selected (repeatable)"
    )

    return parser


def run_recommend(args, recipe_db: RecipeDB, prefs: AppPreferences) -> int:
    selected = ()
    for name in args.ingredient:
        selected = add_ingredient(selected, name)

    request = RecommendationRequest(
        meal_time=args.meal_time or prefs.default_meal_time,
        diet_type=args.diet_type or prefs.default_diet_type,
        selected_ingredients=selected,
        taste_preference=args.taste,
        top_n=args.top_n if args.top_n is not None else prefs.top_n,
    )
    scorer = RecipeScorer(rng=random.Random(args.seed)) if args.seed is not None else RecipeScorer()
    candidates = rank_candidates(recipe_db.get_all_recipes(), request, scorer)

    if args.output == "json":
        print(format_recommendations_json_string(candidates, indent=2))
    else:
        print(format_recommendations_markdown(candidates))

    if not candidates:
        print(EMPTY_STATE_MESSAGE, file=sys.stderr)
    return 0


def run_spin(args, recipe_db: RecipeDB, prefs: AppPreferences) -> int:
    custom = ()
    for dish in args.custom_dish:
        custom = add_custom_dish(custom, dish)

    request = RouletteRequest(
        meal_time=args.meal_time,
        diet_type=args.diet_type,
        taste_preference=args.taste,
        mode=args.mode,
        custom_dishes=custom,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    result = spin(recipe_db.get_all_recipes(), request, prefs.roulette, rng=rng)

    picked = recipe_db.get_recipe_by_id(result.recipe_id) if result.recipe_id else None
    print(format_spin_markdown(result, picked))
    return 0


def run_show(args, recipe_db: RecipeDB) -> int:
    recipe = recipe_db.get_recipe_by_id(args.recipe_id)
    if recipe is None:
        print(f"Error: Recipe not found: {args.recipe_id}", file=sys.stderr)
        return 1
    print(format_recipe_markdown(recipe))
    return 0


def run_suggest(args, prefs: AppPreferences) -> int:
    for name in suggest_ingredients(args.term, args.selected, prefs.common_ingredients):
        print(name)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        prefs = load_preferences(Path(args.config))
    except (PreferencesError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "suggest":
        return run_suggest(args, prefs)

    recipes_path = Path(args.recipes)
    if not recipes_path.exists():
        print(f"Error: Recipes file not found: {recipes_path}", file=sys.stderr)
        return 1

    try:
        recipe_db = RecipeDB(str(recipes_path))
    except (CatalogError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "recommend":
        return run_recommend(args, recipe_db, prefs)
    if args.command == "spin":
        return run_spin(args, recipe_db, prefs)
    return run_show(args, recipe_db)


if __name__ == "__main__":
    sys.exit(main())
