"""Tests for the FastAPI server."""
import json

import pytest
from fastapi.testclient import TestClient

from pantry_picks.api import server
from pantry_picks.data_layer.models import MEAL_TIMES


def recipe_record(rid, meal_time, diet_type, tags=(), duration=15, taste=("savory",), ingredients=("egg",)):
    return {
        "id": rid,
        "title": f"Dish {rid}",
        "mealTime": list(meal_time),
        "taste": list(taste),
        "dietType": list(diet_type),
        "durationMin": duration,
        "servings": 1,
        "difficulty": "easy",
        "tags": list(tags),
        "nutrition": {"cal": 200, "protein_g": 10},
        "ingredients": [{"name": n, "amount": "1"} for n in ingredients],
        "steps": ["Cook"],
        "image": None,
    }


@pytest.fixture
def client(tmp_path, monkeypatch):
    catalog = {
        "recipes": [
            recipe_record("A", ["lunch"], ["fitness"], tags=["high-protein"], duration=15),
            recipe_record("B", ["lunch"], ["fitness"], duration=50),
            recipe_record("C", ["dinner"], ["normal"], taste=["spicy"]),
        ]
    }
    recipes_file = tmp_path / "recipes.json"
    recipes_file.write_text(json.dumps(catalog))
    monkeypatch.setattr(server, "recipes_path", str(recipes_file))
    monkeypatch.setattr(server, "preferences_path", str(tmp_path / "missing.yaml"))
    return TestClient(server.app)


def test_recommend_ranks_results(client):
    response = client.post("/api/recommend", json={"meal_time": "lunch", "diet_type": "fitness", "top_n": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert [r["id"] for r in data["recipes"]] == ["A", "B"]
    assert data["recipes"][0]["base_score"] == 8.0
    assert data["recipes"][1]["base_score"] == 1.0


def test_recommend_empty_result_is_not_an_error(client):
    response = client.post("/api/recommend", json={"meal_time": "breakfast", "diet_type": "normal"})
    assert response.status_code == 200
    assert response.json()["count"] == 0
    assert "message" in response.json()


def test_recommend_rejects_unknown_meal_time(client):
    response = client.post("/api/recommend", json={"meal_time": "brunch", "diet_type": "normal"})
    assert response.status_code == 422


def test_recommend_catalog_error_is_500(client, tmp_path, monkeypatch):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"recipes": [recipe_record("X", [], ["normal"])]}))
    monkeypatch.setattr(server, "recipes_path", str(bad))
    response = client.post("/api/recommend", json={"meal_time": "lunch", "diet_type": "normal"})
    assert response.status_code == 500


def test_roulette_dinner_pool(client):
    response = client.post("/api/roulette", json={"meal_time": "dinner"})
    assert response.status_code == 200
    data = response.json()
    assert data["pool_size"] == 1
    assert data["choice"] == "Dish C"
    assert data["options"] == ["Dish C"] * 8


def test_roulette_takeout_with_custom_dishes(client):
    response = client.post(
        "/api/roulette",
        json={"meal_time": "breakfast", "mode": "takeout", "custom_dishes": ["Dumplings", " Dumplings "]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["pool_size"] == 0
    assert "Dumplings" in data["options"]
    assert data["options"].count("Dumplings") == 1
    assert "Pizza Delivery" in data["options"]


def test_roulette_defaults(client):
    response = client.post("/api/roulette", json={})
    assert response.status_code == 200
    assert response.json()["pool_size"] == 3


def test_list_recipes(client):
    response = client.get("/api/recipes")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "A", "title": "Dish A"},
        {"id": "B", "title": "Dish B"},
        {"id": "C", "title": "Dish C"},
    ]


def test_get_recipe(client):
    response = client.get("/api/recipes/C")
    assert response.status_code == 200
    assert response.json()["taste"] == ["spicy"]


def test_get_recipe_not_found(client):
    response = client.get("/api/recipes/nope")
    assert response.status_code == 404


def test_suggest_ingredients(client):
    response = client.get("/api/ingredients/suggest", params={"q": "sauce", "selected": ["soy sauce"]})
    assert response.status_code == 200
    assert response.json() == ["oyster sauce"]


def test_roulette_accepts_every_meal_time(client):
    for meal_time in ("any",) + MEAL_TIMES:
        response = client.post("/api/roulette", json={"meal_time": meal_time})
        assert response.status_code == 200, meal_time
    assert client.post("/api/roulette", json={"meal_time": "brunch"}).status_code == 422


def test_roulette_reports_recipe_id(client):
    data = client.post("/api/roulette", json={"meal_time": "dinner"}).json()
    assert data["recipe_id"] == "C"


def test_get_recipe_missing_catalog_is_500(client, tmp_path, monkeypatch):
    monkeypatch.setattr(server, "recipes_path", str(tmp_path / "gone.json"))
    response = client.get("/api/recipes/A")
    assert response.status_code == 500


def test_suggest_bad_preferences_is_500(client, tmp_path, monkeypatch):
    prefs = tmp_path / "prefs.yaml"
    prefs.write_text("defaults:\n  meal_time: brunch\n")
    monkeypatch.setattr(server, "preferences_path", str(prefs))
    response = client.get("/api/ingredients/suggest", params={"q": "egg"})
    assert response.status_code == 500
    assert "brunch" in response.json()["detail"]
