"""
Layout primitives for consistent page structure.

Provides the page header and the recipe card grid shared by the search and
gallery views.
"""

from typing import Callable, Optional, Sequence

import streamlit as st

from finder.models import Recipe

GRID_COLUMNS = 4


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown('<div class="skrf-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="subtitle">{subtitle}</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def recipe_grid(
    recipes: Sequence[Recipe],
    on_open: Callable[[Recipe], None],
    key_prefix: str,
) -> None:
    """
    Render recipes as a grid of cards with an "Open" button each.

    Args:
        recipes: Recipes in display order
        on_open: Called with the clicked recipe
        key_prefix: Unique prefix for widget keys on this page (e.g. "search", "gallery")
    """
    for row_start in range(0, len(recipes), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, recipe in zip(cols, recipes[row_start:row_start + GRID_COLUMNS]):
            with col:
                with st.container(border=True):
                    if recipe.thumbnail_url:
                        st.image(recipe.thumbnail_url, use_container_width=True)
                    st.markdown(f"**{recipe.name}**")
                    st.caption(" · ".join(part for part in (recipe.category, recipe.area) if part))
                    if st.button("Open", key=f"{key_prefix}_open_{recipe.id}", use_container_width=True):
                        on_open(recipe)
