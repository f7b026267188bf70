"""Ingredient name normalization for matching user selections.

User-typed names and catalog names are compared in a canonical form:
every whitespace character removed, then lower-cased. "Green Pepper",
"green  pepper" and "greenpepper" all match each other; no substring or
fuzzy matching happens here.
"""

import re
from typing import Iterable, Set

_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Return the canonical matching form of an ingredient name.

    Args:
        name: Raw ingredient name

    Returns:
        Name with all whitespace stripped, lower-cased
    """
    return _WHITESPACE.sub("", name).lower()


def normalized_name_set(names: Iterable[str]) -> Set[str]:
    """Build a lookup set of canonical names."""
    return {normalize_name(n) for n in names}
