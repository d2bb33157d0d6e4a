"""
Messages shown when a recipe lookup fails, comes back empty, or is still in flight.

The search, gallery and detail pages all report TheMealDB outages, empty result
lists and pending requests through these helpers.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Report a failed TheMealDB request, e.g. a category list that could not load.

    Args:
        message: What could not be fetched
        hint: What the cook can still do, such as reloading the page
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Loading..."):
    """Show a spinner while recipes or lookup lists are fetched from TheMealDB."""
    with st.spinner(label):
        yield
