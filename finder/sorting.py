"""
Sorting utilities for recipe lists.

Key functions:
- collation_key: locale-style string key (accents and case only break ties)
- sort_recipes: stable sort by name, category or area, ascending or descending

Sorting never mutates its input; a new list is always returned.
"""

import unicodedata
from typing import Callable, Dict, Iterable, List, Tuple

from finder.models import Recipe

SORT_FIELDS: Dict[str, Callable[[Recipe], str]] = {
    "name": lambda r: r.name,
    "category": lambda r: r.category,
    "area": lambda r: r.area,
}

SORT_ORDERS = ("asc", "desc")

DEFAULT_SORT_BY = "name"
DEFAULT_SORT_ORDER = "asc"


def validate_sort_by(sort_by: str) -> str:
    """Return the canonical sort key or raise ValueError for unknown fields."""
    key = (sort_by or "").strip().lower()
    if key not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field {sort_by!r}; expected one of {sorted(SORT_FIELDS)}")
    return key


def validate_sort_order(sort_order: str) -> str:
    order = (sort_order or "").strip().lower()
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order {sort_order!r}; expected 'asc' or 'desc'")
    return order


def collation_key(value: str) -> Tuple[str, str, str]:
    """
    Build a sort key that approximates locale-aware comparison.

    Primary: text with accents stripped, case-folded ("Éclair" sorts with "eclair").
    Secondary: case-folded text with accents kept.
    Tertiary: lowercase before uppercase.
    """
    text = unicodedata.normalize("NFKD", value or "")
    base = "".join(ch for ch in text if not unicodedata.combining(ch)).casefold()
    return (base, text.casefold(), text.swapcase())


def sort_recipes(
    recipes: Iterable[Recipe],
    sort_by: str = DEFAULT_SORT_BY,
    sort_order: str = DEFAULT_SORT_ORDER,
) -> List[Recipe]:
    """
    Sort recipes by a single field.

    The ascending sort is stable (equal keys keep their input order). The
    descending order is the exact reverse of the ascending one, so reversing
    an ascending result always equals the descending result.

    Args:
        recipes: Recipes to sort (not mutated)
        sort_by: "name", "category" or "area"
        sort_order: "asc" or "desc"

    Returns:
        New sorted list of Recipe objects.

    Raises:
        ValueError: If sort_by or sort_order is not supported.

    Examples:
        >>> from finder.models import Recipe
        >>> recipes = [Recipe(id="1", name="Tart"), Recipe(id="2", name="apple pie")]
        >>> [r.name for r in sort_recipes(recipes, "name", "asc")]
        ['apple pie', 'Tart']
    """
    field = SORT_FIELDS[validate_sort_by(sort_by)]
    order = validate_sort_order(sort_order)

    ascending = sorted(recipes, key=lambda r: collation_key(field(r)))
    if order == "desc":
        ascending.reverse()
    return ascending
