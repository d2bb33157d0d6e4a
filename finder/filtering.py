"""
Category / area filtering for the gallery view.

filter_recipes is a pure function of (base collection, category selection,
area selection). An empty selection on an axis means that axis imposes no
constraint. The base collection's order is preserved.
"""

from typing import AbstractSet, FrozenSet, Iterable, List

from finder.models import Recipe


def toggle(selection: AbstractSet[str], value: str) -> FrozenSet[str]:
    """
    Toggle a value in a selection set (symmetric difference).

    Examples:
        >>> sorted(toggle(frozenset({"Beef"}), "Dessert"))
        ['Beef', 'Dessert']
        >>> sorted(toggle(frozenset({"Beef"}), "Beef"))
        []
    """
    return frozenset(selection) ^ {value}


def filter_recipes(
    recipes: Iterable[Recipe],
    categories: AbstractSet[str] = frozenset(),
    areas: AbstractSet[str] = frozenset(),
) -> List[Recipe]:
    """
    Return the recipes matching every active filter axis.

    Args:
        recipes: Base collection (not mutated)
        categories: Selected categories; empty means any category
        areas: Selected areas; empty means any area

    Returns:
        New list containing the matching recipes in base order.
    """
    filtered = list(recipes)
    if categories:
        filtered = [r for r in filtered if r.category in categories]
    if areas:
        filtered = [r for r in filtered if r.area in areas]
    return filtered
