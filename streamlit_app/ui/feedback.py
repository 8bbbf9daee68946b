"""
Standardized feedback utilities for empty and loading states.

Provides reusable components for displaying empty states and loading
indicators in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_empty_state(title: str, subtitle: Optional[str] = None, icon: str = "👨‍🍳") -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        icon: Emoji shown above the title
    """
    st.markdown(
        f'<div class="rw-empty-state"><div class="rw-empty-icon">{icon}</div></div>',
        unsafe_allow_html=True,
    )
    st.info(f"**{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Creating recipes…"):
            # Do work here
            pass

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
