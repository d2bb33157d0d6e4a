"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Smart Kitchen Recipe Finder Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, recipe_grid
from ui.feedback import show_error, show_empty_state, working_spinner

__all__ = [
    "load_global_styles",
    "page_header",
    "recipe_grid",
    "show_error",
    "show_empty_state",
    "working_spinner",
]
