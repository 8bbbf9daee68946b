"""
Global CSS Styling for the Recipe Workbench.

This module provides load_global_styles() to inject consistent styling on the
page. Focuses on warm colors, rounded buttons and pill tags.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Workbench app.

    This function:
    - Sets a warm orange accent for headings and buttons
    - Rounds buttons into pills
    - Defines the pill tag variants used on recipe cards
    - Styles the empty state
    """
    css = """
    <style>
        h1, h2, h3, h4 {
            font-weight: 700 !important;
            color: #1f2933 !important;
        }

        .rw-subtitle, .rw-section-caption {
            color: #6b7280 !important;
            font-size: 0.95rem !important;
            margin-bottom: 1rem !important;
        }

        /* Buttons - rounded pills with subtle warm shadow */
        .stButton > button, .stFormSubmitButton > button {
            border-radius: 50px !important;
            box-shadow: 0 2px 6px rgba(234, 88, 12, 0.12) !important;
            font-weight: 600 !important;
        }

        .stButton > button:hover {
            box-shadow: 0 3px 10px rgba(234, 88, 12, 0.2) !important;
            transform: translateY(-1px) !important;
        }

        /* Pill tags */
        .rw-pill {
            display: inline-block;
            padding: 0.2rem 0.7rem;
            border-radius: 999px;
            font-size: 0.8rem;
            font-weight: 600;
            margin: 0 0.25rem 0.25rem 0;
            white-space: nowrap;
        }
        .rw-pill--default { background: #ffedd5; color: #c2410c; }
        .rw-pill--cuisine { background: #dbeafe; color: #1d4ed8; }
        .rw-pill--dietary { background: #dcfce7; color: #15803d; }
        .rw-pill--muted   { background: #f3f4f6; color: #4b5563; }

        /* Empty state */
        .rw-empty-state {
            text-align: center;
            padding-top: 2rem;
        }
        .rw-empty-icon {
            font-size: 4rem;
            opacity: 0.4;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
