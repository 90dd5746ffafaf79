"""Environment-backed settings loaded with python-dotenv."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from config.paths import ENV_FILE, LOCAL_CONFIG_FILE, USER_CONFIG_FILE

logger = logging.getLogger(__name__)

env_path = ENV_FILE


def exists() -> bool:
    """Check whether a .env file is present in the working directory."""
    return env_path.exists()


def config_file() -> Path | None:
    """Pick the config.env file to load.

    Returns:
        The working directory file when present, else the user one, or None.
    """
    for candidate in (LOCAL_CONFIG_FILE, USER_CONFIG_FILE):
        if candidate.exists():
            return candidate
    return None


def load() -> None:
    """Pull env files into the process environment.

    The .env file in the working directory is read first, then the
    config.env file (working directory or ~/.config/footballscore).
    Variables already set in the environment are never overridden.
    """
    if exists():
        load_dotenv(env_path, override=False)
        logger.debug(f"Loaded environment from {env_path}")

    path = config_file()
    if path is not None:
        load_dotenv(path, override=False)
        logger.debug(f"Loaded environment from {path}")


def get(key: str, default: str | None = None) -> str | None:
    """Get an environment variable, treating blank values as unset."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()
