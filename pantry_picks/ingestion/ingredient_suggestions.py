"""Ingredient selection helpers for the ingredient picker."""

from typing import List, Sequence, Tuple

from pantry_picks.ingestion.ingredient_normalizer import normalize_name, normalized_name_set


def suggest_ingredients(
    search_term: str,
    selected: Sequence[str],
    common: Sequence[str],
) -> List[str]:
    """Suggest common ingredients matching a partial search term.

    Args:
        search_term: Text typed so far (empty matches everything)
        selected: Ingredients already chosen (never suggested again)
        common: Suggestion vocabulary, in display order

    Returns:
        Common ingredients containing the term, minus the selected ones
    """
    term = normalize_name(search_term or "")
    already = normalized_name_set(selected)

    return [
        name for name in common
        if term in normalize_name(name) and normalize_name(name) not in already
    ]


def add_ingredient(selected: Sequence[str], name: str) -> Tuple[str, ...]:
    """Return the selection with ``name`` appended.

    Blank names and names already selected (compared in canonical form)
    leave the selection unchanged.
    """
    name = name.strip()
    if not name or normalize_name(name) in normalized_name_set(selected):
        return tuple(selected)
    return tuple(selected) + (name,)


def remove_ingredient(selected: Sequence[str], name: str) -> Tuple[str, ...]:
    """Return the selection without ``name`` (canonical-form comparison)."""
    target = normalize_name(name)
    return tuple(item for item in selected if normalize_name(item) != target)
