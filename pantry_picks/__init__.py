"""Pantry Picks: ingredient-driven recipe recommendations and a random-pick wheel."""
