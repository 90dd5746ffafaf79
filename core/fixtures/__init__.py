"""Fixtures module - Fetches, selects and formats football match data.

- Fetching fixtures and club data from api-football.com
- Decoding payloads into typed records
- Selecting the live, latest or next match
- Formatting one output line
"""

from core.fixtures.client import FootballApi
from core.fixtures.formatter import format_club, format_match, format_no_match
from core.fixtures.models import (
    ClubRecord,
    FixtureRecord,
    FixtureStatus,
    parse_clubs,
    parse_fixtures,
)
from core.fixtures.selector import select_match

__all__ = [
    "FootballApi",
    "ClubRecord",
    "FixtureRecord",
    "FixtureStatus",
    "parse_clubs",
    "parse_fixtures",
    "select_match",
    "format_match",
    "format_no_match",
    "format_club",
]
