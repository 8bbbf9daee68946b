"""
Shared pytest fixtures.

Every test writes events to its own temporary log so the suite never touches
events.log in the working directory.
"""

import pytest

from recipe_workbench import events


@pytest.fixture(autouse=True)
def isolated_event_log(tmp_path, monkeypatch):
    """Redirect the JSONL event log to a per-test temporary file."""
    log_file = tmp_path / "events.log"
    monkeypatch.setattr(events, "EVENT_LOG_FILE", log_file)
    monkeypatch.delenv("RECIPE_EVENTS_ENABLED", raising=False)
    return log_file
