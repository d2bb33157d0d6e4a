"""
View State Management Module.

This module wraps Streamlit's session_state to hold one controller per view for
the current browser session:

- `search_controller`: SearchController for the root search view
- `search_scheduler`: PollingScheduler that drives the search debounce
- `filter_controller`: FilterController for the gallery view
- `detail_navigator`: DetailNavigator for the detail view
- `detail_request`: pending (recipe_id, NavigationContext) handed from a list view

# NOTE: session_state only lives as long as the browser session. Reloading the
    page starts from empty controllers.
"""

from typing import Optional, Tuple

import streamlit as st

from finder.gallery import FilterController
from finder.navigation import DetailNavigator, NavigationContext
from finder.scheduling import PollingScheduler
from finder.search import SearchController
from utils.api_client import get_gateway

SEARCH_CONTROLLER_KEY = "search_controller"
SEARCH_SCHEDULER_KEY = "search_scheduler"
FILTER_CONTROLLER_KEY = "filter_controller"
DETAIL_NAVIGATOR_KEY = "detail_navigator"
DETAIL_REQUEST_KEY = "detail_request"

SEARCH_PAGE = "app.py"
GALLERY_PAGE = "pages/01_🖼_Gallery.py"
DETAIL_PAGE = "pages/02_🍽_Recipe_Detail.py"

ORIGIN_PAGES = {
    SearchController.origin: SEARCH_PAGE,
    FilterController.origin: GALLERY_PAGE,
}


def get_search_scheduler() -> PollingScheduler:
    if SEARCH_SCHEDULER_KEY not in st.session_state:
        st.session_state[SEARCH_SCHEDULER_KEY] = PollingScheduler()
    return st.session_state[SEARCH_SCHEDULER_KEY]


def get_search_controller() -> SearchController:
    """Get (or create) the search controller for this session."""
    if SEARCH_CONTROLLER_KEY not in st.session_state:
        st.session_state[SEARCH_CONTROLLER_KEY] = SearchController(
            get_gateway(), scheduler=get_search_scheduler()
        )
    return st.session_state[SEARCH_CONTROLLER_KEY]


def get_filter_controller() -> FilterController:
    """Get (or create) the gallery filter controller. Loading is left to the page."""
    if FILTER_CONTROLLER_KEY not in st.session_state:
        st.session_state[FILTER_CONTROLLER_KEY] = FilterController(get_gateway())
    return st.session_state[FILTER_CONTROLLER_KEY]


def get_detail_navigator() -> DetailNavigator:
    if DETAIL_NAVIGATOR_KEY not in st.session_state:
        st.session_state[DETAIL_NAVIGATOR_KEY] = DetailNavigator(get_gateway())
    return st.session_state[DETAIL_NAVIGATOR_KEY]


def open_detail(recipe_id: str, context: Optional[NavigationContext] = None) -> None:
    """
    Hand a recipe and its list context to the detail view and switch to it.

    Args:
        recipe_id: Recipe to open
        context: Ordered recipe sequence from the launching view (optional)
    """
    st.session_state[DETAIL_REQUEST_KEY] = (recipe_id, context)
    st.switch_page(DETAIL_PAGE)


def take_detail_request() -> Optional[Tuple[str, Optional[NavigationContext]]]:
    """Pop the pending detail request, if a list view left one."""
    return st.session_state.pop(DETAIL_REQUEST_KEY, None)


def origin_page(origin: Optional[str]) -> str:
    """Page to return to for a navigation origin; direct links go to the search view."""
    return ORIGIN_PAGES.get(origin or "", SEARCH_PAGE)
