"""
Smart Kitchen Recipe Finder - Streamlit Frontend Main Entry Point.

This is the root search view: debounced search-as-you-type over TheMealDB with
sortable results. Run with:
    streamlit run streamlit_app/app.py

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder
(gallery/filter view and recipe detail view).
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import finder
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import finder.config  # noqa: F401

import streamlit as st
from st_keyup import st_keyup

from finder.models import Recipe
from ui.styles import load_global_styles
from ui.layout import page_header, recipe_grid
from ui.feedback import show_empty_state, working_spinner
from utils.state import get_search_controller, get_search_scheduler, open_detail

# How often the results fragment polls the debounce scheduler
POLL_INTERVAL_SECONDS = 0.2

SORT_BY_LABELS = {"name": "Name", "category": "Category", "area": "Area"}
SORT_ORDER_LABELS = {"asc": "Ascending", "desc": "Descending"}

st.set_page_config(
    page_title="Smart Kitchen Recipe Finder",
    page_icon="🍽️",
    layout="wide",
)

load_global_styles()

controller = get_search_controller()

page_header(
    "Welcome to Smart Kitchen Recipe Finder!",
    "Start typing in the search bar to find delicious recipes from around the world.",
)

# Widget state is dropped when the user visits another page; restore it from the controller
st.session_state.setdefault("search_sort_by_input", controller.sort_by)
st.session_state.setdefault("search_sort_order_input", controller.sort_order)

# Reruns on every keystroke; the controller's debouncer coalesces them into one search
query = st_keyup(
    "Search meals",
    value=controller.query,
    placeholder="Search meals...",
    label_visibility="collapsed",
    key="search_query_input",
)
controller.set_query(query or "")

sort_col, order_col = st.columns(2)
with sort_col:
    sort_by = st.selectbox(
        "Sort by:",
        options=list(SORT_BY_LABELS),
        format_func=SORT_BY_LABELS.get,
        key="search_sort_by_input",
    )
    controller.set_sort_by(sort_by)
with order_col:
    sort_order = st.selectbox(
        "Order:",
        options=list(SORT_ORDER_LABELS),
        format_func=SORT_ORDER_LABELS.get,
        key="search_sort_order_input",
    )
    controller.set_sort_order(sort_order)


def _open(recipe: Recipe) -> None:
    open_detail(recipe.id, controller.navigation_context())


@st.fragment(run_every=POLL_INTERVAL_SECONDS)
def render_results() -> None:
    """Fire the debounced search once due, then render the sorted results."""
    if controller.has_pending_search:
        with working_spinner("Loading..."):
            get_search_scheduler().run_due()

    if controller.loading:
        st.caption("Loading...")

    recipe_grid(controller.recipes, on_open=_open, key_prefix="search")

    if controller.no_results:
        show_empty_state(f'No meals found for "{controller.query}"')


render_results()
