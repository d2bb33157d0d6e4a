"""Shared fixtures: recipe factory, mocked gateway, a controllable clock and timer stubs."""

from typing import Optional
from unittest.mock import Mock

import pytest

from finder.connectors.base import BaseRecipeGateway
from finder.models import Recipe
from finder.scheduling import PollingScheduler, Scheduler, TimerHandle


def build_recipe(recipe_id: str, name: Optional[str] = None, category: str = "Beef",
                 area: str = "British", **kwargs) -> Recipe:
    return Recipe(id=recipe_id, name=name or f"Recipe {recipe_id}", category=category, area=area, **kwargs)


class FakeClock:
    """Monotonic clock that only moves when advance() is called."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds



class StartedTimer(TimerHandle):
    """Timer whose action has already begun, so cancel() only sets the flag."""

    def __init__(self, action) -> None:
        self.action = action
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class StartedTimerScheduler(Scheduler):
    """Records scheduled actions so a test can run them by hand, cancelled or not."""

    def __init__(self) -> None:
        self.timers = []

    def schedule(self, delay: float, action) -> StartedTimer:
        timer = StartedTimer(action)
        self.timers.append(timer)
        return timer

@pytest.fixture
def make_recipe():
    return build_recipe


@pytest.fixture
def gateway():
    mock_gateway = Mock(spec=BaseRecipeGateway)
    mock_gateway.search_by_name.return_value = []
    mock_gateway.get_by_id.return_value = None
    mock_gateway.list_categories.return_value = []
    mock_gateway.list_areas.return_value = []
    return mock_gateway


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return PollingScheduler(clock=clock)


@pytest.fixture
def started_scheduler():
    return StartedTimerScheduler()
