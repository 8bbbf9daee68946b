"""
Layout primitives for consistent page structure.

Provides reusable components for page headers, sections, cards and tag pills.
"""

import html
from contextlib import contextmanager
from typing import Callable, Optional
import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., search box, buttons)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 2])
        with col_title:
            _render_title(title, subtitle)
        with col_right:
            right()
    else:
        _render_title(title, subtitle)


def _render_title(title: str, subtitle: Optional[str]) -> None:
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(f'<div class="rw-subtitle">{subtitle}</div>', unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="rw-section-caption">{caption}</div>', unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Card Title"):
            st.write("Card content")

    Args:
        title: Optional card title
    """
    with st.container(border=True):
        if title:
            st.markdown(f"### {title}")
        yield


def pill_tag(text: str, variant: str = "default") -> str:
    """
    Create HTML for a small rounded pill tag (e.g., a cuisine or dietary label).

    The text is HTML-escaped, so user-entered ingredients are safe to pass.

    Args:
        text: Text to display in the tag
        variant: Style variant ("default", "cuisine", "dietary", "muted")

    Returns:
        HTML string for the pill tag
    """
    return f'<span class="rw-pill rw-pill--{variant}">{html.escape(text)}</span>'
