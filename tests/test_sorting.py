"""
Tests for recipe sorting.
"""

import pytest

from finder.sorting import collation_key, sort_recipes


@pytest.fixture
def recipes(make_recipe):
    return [
        make_recipe("1", "Tarte Tatin", category="Dessert", area="French"),
        make_recipe("2", "apple Frangipan Tart", category="Dessert", area="British"),
        make_recipe("3", "Beef Wellington", category="Beef", area="British"),
        make_recipe("4", "Éclair", category="Dessert", area="French"),
        make_recipe("5", "Kung Pao Chicken", category="Chicken", area="Chinese"),
    ]


class TestSortRecipes:
    """Test cases for sort_recipes."""

    def test_sort_by_name_ascending_is_case_and_accent_insensitive(self, recipes):
        names = [r.name for r in sort_recipes(recipes, "name", "asc")]
        assert names == ["apple Frangipan Tart", "Beef Wellington", "Éclair", "Kung Pao Chicken", "Tarte Tatin"]

    def test_sort_by_category_is_stable(self, recipes):
        result = sort_recipes(recipes, "category", "asc")
        assert [r.id for r in result] == ["3", "5", "1", "2", "4"]

    def test_sort_by_area(self, recipes):
        result = sort_recipes(recipes, "area", "asc")
        assert [r.area for r in result] == ["British", "British", "Chinese", "French", "French"]

    @pytest.mark.parametrize("field", ["name", "category", "area"])
    def test_descending_is_reverse_of_ascending(self, recipes, field):
        ascending = sort_recipes(recipes, field, "asc")
        descending = sort_recipes(recipes, field, "desc")
        assert list(reversed(ascending)) == descending

    def test_does_not_mutate_input(self, recipes):
        original = list(recipes)
        result = sort_recipes(recipes, "name", "desc")
        assert recipes == original
        assert result is not recipes

    def test_empty_input(self):
        assert sort_recipes([], "name", "asc") == []

    def test_unknown_sort_field_raises(self, recipes):
        with pytest.raises(ValueError, match="Unknown sort field"):
            sort_recipes(recipes, "price", "asc")

    def test_unknown_sort_order_raises(self, recipes):
        with pytest.raises(ValueError, match="Unknown sort order"):
            sort_recipes(recipes, "name", "sideways")


class TestCollationKey:
    """Test cases for the locale-style key."""

    def test_accents_only_break_ties(self):
        assert collation_key("eclair")[0] == collation_key("Éclair")[0]
        assert collation_key("eclair") != collation_key("Éclair")

    def test_lowercase_sorts_before_uppercase_on_tie(self):
        assert collation_key("apple") < collation_key("Apple")
