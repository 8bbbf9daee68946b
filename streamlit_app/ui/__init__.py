"""
UI Styling and Layout Module.

This module provides global CSS styling and reusable layout, feedback and
tag components for the Recipe Workbench Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, section, card, pill_tag
from ui.feedback import show_empty_state, working_spinner

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "card",
    "pill_tag",
    "show_empty_state",
    "working_spinner",
]
