"""
Tests for the detail navigator.
"""

import pytest

from finder.connectors.base import GatewayError
from finder.navigation import DetailNavigator, NavigationContext


@pytest.fixture
def sequence(make_recipe):
    return (make_recipe("r1", "One"), make_recipe("r2", "Two"), make_recipe("r3", "Three"))


@pytest.fixture
def navigator(gateway, make_recipe):
    # Full records come from the gateway, keyed by id
    gateway.get_by_id.side_effect = lambda recipe_id: make_recipe(recipe_id, instructions="Full detail")
    return DetailNavigator(gateway)


class TestOpen:
    """Test cases for opening a recipe."""

    def test_open_with_context_locates_index(self, navigator, sequence):
        navigator.open("r2", NavigationContext(sequence, origin="search"))
        assert navigator.status == "ready"
        assert navigator.index == 1
        assert navigator.sequence == sequence
        assert navigator.recipe.instructions == "Full detail"
        assert navigator.position_label == "2 of 3"

    def test_open_without_context_is_singleton(self, navigator, gateway):
        recipe = navigator.open("52772")
        gateway.get_by_id.assert_called_once_with("52772")
        assert navigator.sequence == (recipe,)
        assert navigator.index == 0
        assert not navigator.has_previous
        assert not navigator.has_next
        assert navigator.back() is None

    def test_id_missing_from_context_defaults_to_first(self, navigator, sequence):
        navigator.open("r9", NavigationContext(sequence))
        assert navigator.status == "ready"
        assert navigator.index == 0

    def test_absent_recipe_is_not_found(self, gateway, sequence):
        gateway.get_by_id.return_value = None
        navigator = DetailNavigator(gateway)
        assert navigator.open("r2", NavigationContext(sequence, origin="gallery")) is None
        assert navigator.status == "not_found"
        assert not navigator.has_previous
        assert not navigator.has_next
        assert navigator.back() == "gallery"

    def test_gateway_error_is_not_found(self, gateway):
        gateway.get_by_id.side_effect = GatewayError("offline")
        navigator = DetailNavigator(gateway)
        assert navigator.open("r1") is None
        assert navigator.status == "not_found"


class TestStepping:
    """Test cases for previous/next through the captured sequence."""

    def test_previous_lands_on_first(self, navigator, sequence):
        navigator.open("r2", NavigationContext(sequence))
        recipe = navigator.previous()
        assert recipe.id == "r1"
        assert navigator.index == 0
        assert not navigator.has_previous
        assert navigator.has_next

    def test_next_lands_on_last(self, navigator, sequence):
        navigator.open("r2", NavigationContext(sequence))
        recipe = navigator.next()
        assert recipe.id == "r3"
        assert navigator.index == 2
        assert not navigator.has_next
        assert navigator.has_previous

    def test_stepping_keeps_sequence_and_origin(self, navigator, sequence):
        navigator.open("r1", NavigationContext(sequence, origin="gallery"))
        navigator.next()
        navigator.next()
        navigator.previous()
        assert navigator.sequence == sequence
        assert navigator.recipe_id == "r2"
        assert navigator.back() == "gallery"

    def test_each_step_refetches_full_detail(self, navigator, gateway, sequence):
        navigator.open("r1", NavigationContext(sequence))
        navigator.next()
        assert [c.args[0] for c in gateway.get_by_id.call_args_list] == ["r1", "r2"]

    def test_disabled_steps_are_noops(self, navigator, gateway, sequence):
        navigator.open("r1", NavigationContext(sequence))
        assert navigator.previous().id == "r1"
        navigator.open("r3", NavigationContext(sequence))
        assert navigator.next().id == "r3"
        assert gateway.get_by_id.call_count == 2

    def test_failed_step_shows_not_found(self, navigator, gateway, sequence, make_recipe):
        navigator.open("r1", NavigationContext(sequence))
        gateway.get_by_id.side_effect = lambda recipe_id: None
        assert navigator.next() is None
        assert navigator.status == "not_found"
        assert navigator.recipe_id == "r2"


class TestNavigationContext:
    """Test cases for NavigationContext."""

    def test_index_of(self, sequence):
        context = NavigationContext(sequence)
        assert context.index_of("r3") == 2
        assert context.index_of("nope") is None

    def test_empty_navigator_label(self, gateway):
        assert DetailNavigator(gateway).position_label == ""
