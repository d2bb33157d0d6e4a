"""
Tests for the pure category/area filter.
"""

import pytest

from finder.filtering import filter_recipes, toggle


@pytest.fixture
def base(make_recipe):
    return [
        make_recipe("1", category="Beef", area="British"),
        make_recipe("2", category="Dessert", area="French"),
        make_recipe("3", category="Beef", area="Italian"),
        make_recipe("4", category="Seafood", area="British"),
        make_recipe("5", category="Dessert", area="British"),
    ]


class TestFilterRecipes:
    """Test cases for filter_recipes."""

    def test_no_selection_returns_base(self, base):
        assert filter_recipes(base) == base

    def test_category_axis(self, base):
        assert [r.id for r in filter_recipes(base, {"Beef"})] == ["1", "3"]

    def test_area_axis(self, base):
        assert [r.id for r in filter_recipes(base, areas={"British"})] == ["1", "4", "5"]

    def test_both_axes_intersect(self, base):
        result = filter_recipes(base, {"Beef", "Dessert"}, {"British"})
        assert [r.id for r in result] == ["1", "5"]

    def test_result_is_ordered_subset_satisfying_every_axis(self, base):
        categories, areas = {"Dessert", "Seafood"}, {"British", "French"}
        result = filter_recipes(base, categories, areas)
        assert all(r.category in categories and r.area in areas for r in result)
        positions = [base.index(r) for r in result]
        assert positions == sorted(positions)

    def test_no_match(self, base):
        assert filter_recipes(base, {"Vegan"}) == []

    def test_returns_new_list(self, base):
        result = filter_recipes(base)
        assert result is not base


class TestToggle:
    """Test cases for selection toggling."""

    def test_toggle_adds_and_removes(self):
        selection = toggle(frozenset(), "Beef")
        assert selection == {"Beef"}
        assert toggle(selection, "Beef") == frozenset()

    def test_toggle_twice_is_identity(self):
        selection = frozenset({"Beef", "Dessert"})
        assert toggle(toggle(selection, "Seafood"), "Seafood") == selection
        assert toggle(toggle(selection, "Beef"), "Beef") == selection
