"""
Configuration management for the Recipe Workbench.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by the Streamlit entry point
(streamlit_app/app.py) so .env is loaded before any other code reads
environment variables.

When deployed, .env usually does not exist. load_dotenv() is safe to call and
will no-op; platform environment variables are used instead.

Environment Variables:
- RECIPE_GENERATION_DELAY_MS: Optional, simulated generation delay in milliseconds (default: 2000)
- RECIPE_RANDOM_SEED: Optional, integer seed for template randomness (default: unseeded)
- RECIPE_EVENTS_ENABLED: Optional, "false"/"0"/"no" disables the JSONL event log (default: enabled)
- RECIPE_EVENT_LOG: Optional, path of the JSONL event log (default: events.log)
- LOG_LEVEL: Optional, Python logging level name (default: INFO)
"""

import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_GENERATION_DELAY_MS = 2000
DEFAULT_EVENT_LOG = "events.log"
DEFAULT_LOG_LEVEL = "INFO"

_FALSE_VALUES = {"0", "false", "no", "off"}


def load_env_file() -> None:
    """
    Load environment variables from the .env file at the project root.

    The project root is located by going up from this file
    (recipe_workbench/config.py -> recipe_workbench/ -> project root).

    Safe to call multiple times. override=False means variables already set in
    the environment take precedence over .env values.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class WorkbenchConfig:
    """Configuration for recipe generation."""

    @staticmethod
    def get_generation_delay_seconds() -> float:
        """
        Get the simulated generation delay.

        Returns:
            Delay in seconds (default: 2.0). Invalid, non-finite or negative values fall
            back to the default.
        """
        raw = os.getenv("RECIPE_GENERATION_DELAY_MS")
        if raw is None or not raw.strip():
            return DEFAULT_GENERATION_DELAY_MS / 1000.0
        try:
            delay_ms = float(raw)
        except ValueError:
            logger.warning("Invalid RECIPE_GENERATION_DELAY_MS=%r, using default", raw)
            return DEFAULT_GENERATION_DELAY_MS / 1000.0
        if not math.isfinite(delay_ms):
            logger.warning("Non-finite RECIPE_GENERATION_DELAY_MS=%r, using default", raw)
            return DEFAULT_GENERATION_DELAY_MS / 1000.0
        if delay_ms < 0:
            logger.warning("Negative RECIPE_GENERATION_DELAY_MS=%r, using default", raw)
            return DEFAULT_GENERATION_DELAY_MS / 1000.0
        return delay_ms / 1000.0

    @staticmethod
    def get_random_seed() -> Optional[int]:
        """
        Get the seed for template randomness.

        Returns:
            Integer seed, or None when unset or not an integer
        """
        raw = os.getenv("RECIPE_RANDOM_SEED")
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Invalid RECIPE_RANDOM_SEED=%r, ignoring", raw)
            return None


class LoggingConfig:
    """Configuration for application logging and the event log."""

    @staticmethod
    def get_log_level() -> str:
        """
        Get the logging level name.

        Returns:
            Upper-cased level name (default: "INFO")
        """
        return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

    @staticmethod
    def events_enabled() -> bool:
        """Whether user actions are appended to the JSONL event log."""
        raw = os.getenv("RECIPE_EVENTS_ENABLED", "true")
        return raw.strip().lower() not in _FALSE_VALUES

    @staticmethod
    def get_event_log_path() -> Path:
        """
        Get the path of the JSONL event log.

        Returns:
            Path (default: events.log in the working directory)
        """
        return Path(os.getenv("RECIPE_EVENT_LOG", DEFAULT_EVENT_LOG))


def get_config_summary() -> Dict[str, Any]:
    """
    Get the effective configuration values.

    Returns:
        Dictionary with keys:
        - generation_delay_seconds: float
        - random_seed: int or None
        - log_level: str
        - events_enabled: bool
        - event_log_path: str
    """
    return {
        "generation_delay_seconds": WorkbenchConfig.get_generation_delay_seconds(),
        "random_seed": WorkbenchConfig.get_random_seed(),
        "log_level": LoggingConfig.get_log_level(),
        "events_enabled": LoggingConfig.events_enabled(),
        "event_log_path": str(LoggingConfig.get_event_log_path()),
    }
