"""FastAPI server for recipe recommendations and the random-pick wheel."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import uvicorn
import yaml
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pantry_picks.data_layer.exceptions import CatalogError, PreferencesError, RecipeNotFoundError
from pantry_picks.data_layer.models import MEAL_TIME_ANY, MEAL_TIMES, DietType, MealTime, Taste
from pantry_picks.data_layer.preferences import AppPreferences, PreferencesLoader
from pantry_picks.data_layer.recipe_db import RecipeDB
from pantry_picks.ingestion.ingredient_suggestions import suggest_ingredients
from pantry_picks.output.formatters import format_recommendations_json, recipe_to_dict, spin_to_dict
from pantry_picks.recommendation.recommender import DEFAULT_TOP_N, RecommendationRequest, rank_candidates
from pantry_picks.recommendation.roulette import RouletteRequest, WheelMode, add_custom_dish, spin

logger = logging.getLogger(__name__)

recipes_path = "data/recipes/recipes.json"
preferences_path = "config/preferences.yaml"

app = FastAPI(title="Pantry Picks API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RecommendBody(BaseModel):
    meal_time: MealTime
    diet_type: DietType
    selected_ingredients: List[str] = Field(default_factory=list)
    taste_preference: Optional[Taste] = None
    top_n: int = DEFAULT_TOP_N


# "any" plus every MealTime value
RouletteMealTime = Literal[(MEAL_TIME_ANY,) + MEAL_TIMES]  # type: ignore[valid-type]


class RouletteBody(BaseModel):
    meal_time: RouletteMealTime = MEAL_TIME_ANY
    diet_type: Optional[DietType] = None
    taste_preference: Optional[Taste] = None
    mode: WheelMode = WheelMode.HOME
    custom_dishes: List[str] = Field(default_factory=list)


def _load_catalog() -> RecipeDB:
    return RecipeDB(recipes_path)


def _load_preferences() -> AppPreferences:
    if not Path(preferences_path).exists():
        return AppPreferences()
    return PreferencesLoader(preferences_path).load()


def _value(member: Optional[Any]) -> Optional[str]:
    return member.value if member is not None else None


@app.post("/api/recommend")
def recommend_recipes(body: RecommendBody) -> Dict[str, Any]:
    try:
        request = RecommendationRequest(
            meal_time=body.meal_time.value,
            diet_type=body.diet_type.value,
            selected_ingredients=tuple(body.selected_ingredients),
            taste_preference=_value(body.taste_preference),
            top_n=body.top_n,
        )
        candidates = rank_candidates(_load_catalog().get_all_recipes(), request)
        return format_recommendations_json(candidates)
    except Exception as exc:
        logger.exception("Recommendation failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/roulette")
def spin_roulette(body: RouletteBody) -> Dict[str, Any]:
    try:
        prefs = _load_preferences()
        dishes = ()
        for dish in body.custom_dishes:
            dishes = add_custom_dish(dishes, dish)

        request = RouletteRequest(
            meal_time=body.meal_time,
            diet_type=_value(body.diet_type),
            taste_preference=_value(body.taste_preference),
            mode=body.mode.value,
            custom_dishes=dishes,
        )
        result = spin(_load_catalog().get_all_recipes(), request, prefs.roulette)
        return spin_to_dict(result)
    except Exception as exc:
        logger.exception("Roulette spin failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/recipes")
def list_recipes() -> List[Dict[str, str]]:
    try:
        recipe_db = _load_catalog()
        return [{"id": r.id, "title": r.title} for r in recipe_db.get_all_recipes()]
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/recipes/{recipe_id}")
def get_recipe(recipe_id: str) -> Dict[str, Any]:
    try:
        recipe = _load_catalog().get_recipe_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe_to_dict(recipe)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (CatalogError, OSError, ValueError) as exc:
        logger.exception("Loading recipe %s failed", recipe_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/ingredients/suggest")
def suggest(q: str = "", selected: Optional[List[str]] = Query(default=None)) -> List[str]:
    try:
        common = _load_preferences().common_ingredients
    except (PreferencesError, OSError, yaml.YAMLError) as exc:
        logger.exception("Loading preferences failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return suggest_ingredients(q, selected or [], common)


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
