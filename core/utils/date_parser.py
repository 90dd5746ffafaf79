"""Date parsing utilities for fixture data.

Centralizes conversion between upstream timestamps, ISO 8601 strings and
pendulum datetimes.
"""

import logging
from datetime import datetime

import pendulum

from config.constants import TIMEZONE

logger = logging.getLogger(__name__)


def from_timestamp(timestamp: int, timezone: str = TIMEZONE) -> pendulum.DateTime:
    """Convert a Unix timestamp into a timezone-aware pendulum datetime.

    Args:
        timestamp: Seconds since the epoch.
        timezone: Target timezone (default: UTC).

    Returns:
        Timezone-aware pendulum datetime.
    """
    return pendulum.from_timestamp(timestamp, tz=timezone)


def parse_iso_datetime(
    datetime_str: str, timezone: str = TIMEZONE
) -> pendulum.DateTime:
    """Parse ISO 8601 datetime into pendulum datetime.

    Used for the fixture ``date`` field (e.g. "2025-11-29T18:00:00+00:00").

    Args:
        datetime_str: ISO 8601 string.
        timezone: Target timezone (default: UTC).

    Returns:
        Timezone-aware pendulum datetime in specified timezone

    Raises:
        ValueError: If datetime_str is invalid
    """
    try:
        clean_str = datetime_str.replace("Z", "+00:00")
        dt = datetime.fromisoformat(clean_str)
        return pendulum.instance(dt).in_timezone(timezone)
    except (ValueError, AttributeError) as e:
        logger.error(f"ISO parse error: '{datetime_str}': {e}")
        raise ValueError(f"Invalid ISO datetime: '{datetime_str}'") from e


def to_timestamp(moment: pendulum.DateTime | datetime | int | None) -> int:
    """Normalize a reference moment into a Unix timestamp.

    Args:
        moment: A datetime, a timestamp, or None for the current time.

    Returns:
        Seconds since the epoch.
    """
    if moment is None:
        return pendulum.now(TIMEZONE).int_timestamp
    if isinstance(moment, int):
        return moment
    return int(moment.timestamp())


def format_kickoff(timestamp: int, fmt: str, timezone: str = TIMEZONE) -> str:
    """Render a kickoff timestamp with a pendulum format string."""
    return from_timestamp(timestamp, timezone).format(fmt)
