"""
Workbench State Binding Module.

This module wraps Streamlit's session_state to hold one RecipeWorkbench per
browser session. All recipe, ingredient and selector state lives inside the
workbench; session_state only stores the workbench itself, a session id for
event logging, and a revision counter.

The revision counter is bumped by a workbench subscriber on every real state
change. Pages compare it before and after handling a widget action and only
call st.rerun() when something changed, so ignored inputs (empty or duplicate
ingredients) do not trigger a rerun.

# NOTE: This module uses session_state, so recipes persist only for the current
    Streamlit session. When the user refreshes the page or starts a new session,
    everything is reset.
"""

import asyncio
import uuid
from typing import List

import streamlit as st

from recipe_workbench.models import Recipe
from recipe_workbench.workbench import RecipeWorkbench

# Session state keys
WORKBENCH_KEY = "workbench"
REVISION_KEY = "workbench_revision"
SESSION_ID_KEY = "session_id"


def get_or_create_session_id() -> str:
    """
    Get or create a session ID stored in st.session_state.

    The same ID is reused for every rerun of the script within one browser
    session and is attached to logged events.

    Returns:
        Session ID string (UUID format)
    """
    if SESSION_ID_KEY not in st.session_state:
        st.session_state[SESSION_ID_KEY] = str(uuid.uuid4())
    return st.session_state[SESSION_ID_KEY]


def _bump_revision(_state) -> None:
    st.session_state[REVISION_KEY] = st.session_state.get(REVISION_KEY, 0) + 1


def _create_workbench() -> RecipeWorkbench:
    workbench = RecipeWorkbench(session_id=get_or_create_session_id())
    workbench.subscribe(_bump_revision)
    return workbench


def init_workbench() -> None:
    """
    Ensure a workbench exists in session state.

    Call this at the start of the page before reading any state.
    """
    if WORKBENCH_KEY not in st.session_state:
        st.session_state[WORKBENCH_KEY] = _create_workbench()
    if REVISION_KEY not in st.session_state:
        st.session_state[REVISION_KEY] = 0


def get_workbench() -> RecipeWorkbench:
    """
    Get the current session's workbench.

    Automatically initializes the workbench if it doesn't exist.
    """
    init_workbench()
    return st.session_state[WORKBENCH_KEY]


def get_revision() -> int:
    """Number of state changes applied to this session's workbench so far."""
    init_workbench()
    return st.session_state[REVISION_KEY]


def reset_workbench() -> None:
    """
    Dispose the current workbench and start over with an empty one.

    A pending generation on the old workbench is cancelled and its result discarded.
    """
    if WORKBENCH_KEY in st.session_state:
        st.session_state[WORKBENCH_KEY].dispose()
    st.session_state[WORKBENCH_KEY] = _create_workbench()
    _bump_revision(None)


def run_generation(workbench: RecipeWorkbench) -> List[Recipe]:
    """
    Drive the workbench's async generation to completion from a script run.

    Streamlit scripts are synchronous, so the coroutine gets its own event loop.

    Returns:
        The newly generated recipes (empty if generation was skipped)
    """
    return asyncio.run(workbench.generate())
