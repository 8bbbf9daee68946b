# recipe_workbench/events.py
"""
Event logging for the Recipe Workbench.

Responsibilities:
- Provide a single log_event(...) function that:
  - Appends a JSONL record to EVENT_LOG_FILE (one event per line).
  - Can be switched off with RECIPE_EVENTS_ENABLED=false.
  - Never raises exceptions (analytics are strictly non-blocking).

- Provide small helper functions for common event types:
  - log_ingredient_added(...)
  - log_ingredient_removed(...)
  - log_recipes_generated(...)
  - log_favorite_toggled(...)
  - log_search_performed(...)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import LoggingConfig

logger = logging.getLogger(__name__)

EVENT_LOG_FILE = LoggingConfig.get_event_log_path()


def _ensure_log_file_directory(path: Path) -> None:
    """
    Ensure the directory for the event log exists.
    Swallow all exceptions to keep logging non-blocking.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except Exception:
        # Non-critical: if this fails, we'll try writing anyway and swallow errors later.
        pass


def _write_to_file(record: Dict[str, Any]) -> None:
    """
    Append a single JSON record to the event log as JSONL.
    Never raise exceptions.
    """
    try:
        path = Path(EVENT_LOG_FILE)
        _ensure_log_file_directory(path)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
    except Exception as exc:
        # Last-resort: log at debug level, never raise.
        logger.debug("Failed to write event to %s: %s", EVENT_LOG_FILE, exc)


def log_event(
    event: str,
    session_id: Optional[str],
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Core event logger.

    Behavior:
    - Build a record with keys: ts, event, session_id, payload.
    - Skip silently when events are disabled in configuration.
    - Write the JSONL record to EVENT_LOG_FILE.
    - Never raise exceptions.
    """
    try:
        if not LoggingConfig.events_enabled():
            return
        record = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "session_id": session_id,
            "payload": payload or {},
        }
    except Exception as exc:
        logger.debug("Failed to build event record (event=%s): %s", event, exc)
        return

    _write_to_file(record)


# ---------------------------------------------------------------------------
# Helper functions for common event types
# ---------------------------------------------------------------------------

def log_ingredient_added(session_id: Optional[str], ingredient: str, count: int) -> None:
    """
    Log an ingredient_added event.

    payload:
    {
        "ingredient": "chicken",
        "count": 3  # ingredient list length after the add
    }
    """
    log_event("ingredient_added", session_id, {"ingredient": ingredient, "count": count})


def log_ingredient_removed(session_id: Optional[str], ingredient: str, count: int) -> None:
    """Log an ingredient_removed event (payload mirrors ingredient_added)."""
    log_event("ingredient_removed", session_id, {"ingredient": ingredient, "count": count})


def log_recipes_generated(
    session_id: Optional[str],
    recipe_ids: List[str],
    cuisine: str,
    dietary: str,
    ingredient_count: int,
) -> None:
    """
    Log a recipes_generated event.

    payload:
    {
        "recipe_ids": ["1718000000000", "1718000000001"],
        "cuisine": "any" | "Italian" | ...,
        "dietary": "any" | "Vegan" | ...,
        "ingredient_count": 2
    }
    """
    payload = {
        "recipe_ids": recipe_ids,
        "cuisine": cuisine,
        "dietary": dietary,
        "ingredient_count": ingredient_count,
    }
    log_event("recipes_generated", session_id, payload)


def log_favorite_toggled(session_id: Optional[str], recipe_id: str, is_favorite: bool) -> None:
    """
    Log a favorite_toggled event.

    payload:
    {
        "recipe_id": "1718000000000",
        "is_favorite": true  # value after the toggle
    }
    """
    log_event("favorite_toggled", session_id, {"recipe_id": recipe_id, "is_favorite": is_favorite})


def log_search_performed(session_id: Optional[str], query: str, result_count: int) -> None:
    """
    Log a search_performed event.

    payload:
    {
        "query": "...",
        "result_count": 4
    }
    """
    log_event("search_performed", session_id, {"query": query, "result_count": result_count})
