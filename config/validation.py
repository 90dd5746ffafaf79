"""Configuration validation utilities."""

import logging

import pendulum

from config.constants import (
    FALSE_VALUES,
    MAX_CLUB_ID,
    MAX_REQUEST_TIMEOUT,
    MIN_REQUEST_TIMEOUT,
    TRUE_VALUES,
)

logger = logging.getLogger(__name__)


def validate_api_key(api_key: str) -> bool:
    """Validate API key format.

    Args:
        api_key: api-football.com key to validate.

    Returns:
        True if the key is usable, False otherwise.
    """
    # Should not be empty or a placeholder copied from the docs
    key = api_key.strip()
    return bool(key) and not key.lower().startswith("your_")


def validate_club_id(club_id: str) -> bool:
    """Validate club ID is a positive integer in the upstream range.

    Args:
        club_id: Club ID to validate.

    Returns:
        True if club ID is valid, False otherwise.
    """
    if not (club_id.isascii() and club_id.isdigit()):
        return False

    return 0 < int(club_id) <= MAX_CLUB_ID


def validate_bool_flag(value: str) -> bool:
    """Validate a 0/1/true/false flag value."""
    return value.strip().lower() in TRUE_VALUES | FALSE_VALUES


def validate_timeout(timeout: str) -> bool:
    """Validate request timeout lies within the allowed window.

    Args:
        timeout: Timeout in seconds.

    Returns:
        True if timeout is a number between 5 and 15, False otherwise.
    """
    try:
        seconds = float(timeout)
    except ValueError:
        return False

    return MIN_REQUEST_TIMEOUT <= seconds <= MAX_REQUEST_TIMEOUT


def validate_exit_code(code: str) -> bool:
    """Validate a process exit code is 0-255."""
    if not (code.isascii() and code.isdigit()):
        return False

    return 0 <= int(code) <= 255


def validate_timezone(name: str) -> bool:
    """Validate an IANA timezone name."""
    try:
        pendulum.timezone(name)
    except (KeyError, ValueError) as e:
        logger.debug(f"Unknown timezone {name!r}: {e}")
        return False
    return True
