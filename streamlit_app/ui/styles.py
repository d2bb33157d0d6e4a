"""
Global CSS Styling for the Smart Kitchen Recipe Finder.

This module provides load_global_styles() to inject consistent styling
across all pages.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles.

    This function:
    - Sets heading weights and spacing
    - Styles the page header subtitle
    - Keeps recipe card images at a uniform aspect ratio
    """
    css = """
    <style>
        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .skrf-page-header .subtitle {
            color: #6b7280;
            font-size: 1.05rem;
            margin-bottom: 1rem;
        }

        div[data-testid="stImage"] img {
            border-radius: 0.5rem;
            aspect-ratio: 1 / 1;
            object-fit: cover;
        }

        .skrf-nav-counter {
            text-align: center;
            font-weight: 600;
            padding-top: 0.4rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
