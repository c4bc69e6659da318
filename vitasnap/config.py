"""Configuration utilities.

Settings are read from environment variables. ``load_settings`` also
loads a ``.env`` file from the working directory when one exists.

Example .env:
    VITASNAP_LOG_LEVEL=DEBUG
    VITASNAP_LOG_JSON=true
    VITASNAP_STRICT_VALIDATION=false
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_bool_env(name: str, default: bool = False) -> bool:
    """
    Read a boolean flag.

    Accepts 1/true/yes/on (case-insensitive) as true; anything else set
    is false.

    Returns:
        Flag value, ``default`` when the variable is unset or empty
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-case level from VITASNAP_LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("VITASNAP_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_json() -> bool:
    """Render logs as JSON (VITASNAP_LOG_JSON), defaults to False."""
    return get_bool_env("VITASNAP_LOG_JSON", False)


def get_strict_validation() -> bool:
    """
    Reject products with nothing to score (VITASNAP_STRICT_VALIDATION).

    Returns:
        True when strict validation is enabled, defaults to False
    """
    return get_bool_env("VITASNAP_STRICT_VALIDATION", False)


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_level: str = "INFO"
    log_json: bool = False
    strict_validation: bool = False


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a .env file; values already set in the
            environment take precedence

    Returns:
        Settings snapshot
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return Settings(
        log_level=get_log_level(),
        log_json=get_log_json(),
        strict_validation=get_strict_validation(),
    )
