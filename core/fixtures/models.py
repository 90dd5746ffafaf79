"""Typed records decoded from api-football.com responses.

Payloads are decoded once here; unknown fields are dropped.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from config.constants import (
    ERROR_UNEXPECTED_PAYLOAD,
    FINISHED_CODES,
    LIVE_CODES,
    POSTPONED_CODES,
    SCHEDULED_CODES,
)
from core.errors import ApiError
from core.utils.date_parser import parse_iso_datetime

logger = logging.getLogger(__name__)


class FixtureStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"
    POSTPONED = "postponed"
    OTHER = "other"

    @classmethod
    def from_short(cls, code: str | None) -> "FixtureStatus":
        """Map an upstream short status code (NS, 1H, FT...) to a status."""
        code = (code or "").upper()
        if code in SCHEDULED_CODES:
            return cls.SCHEDULED
        if code in LIVE_CODES:
            return cls.LIVE
        if code in FINISHED_CODES:
            return cls.FINISHED
        if code in POSTPONED_CODES:
            return cls.POSTPONED
        return cls.OTHER


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class FixtureRecord:
    fixture_id: int
    kickoff_timestamp: int
    status: FixtureStatus
    home_team_name: str
    away_team_name: str
    home_score: int | None = None
    away_score: int | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "FixtureRecord":
        """Build a record from one entry of the fixtures ``response`` list.

        Raises:
            KeyError, TypeError, ValueError: If a required field is missing
                or has the wrong type.
        """
        fixture = raw["fixture"]
        teams = raw["teams"]
        goals = raw.get("goals") or {}

        timestamp = _as_int(fixture.get("timestamp"))
        if timestamp is None:
            timestamp = parse_iso_datetime(fixture["date"]).int_timestamp

        return cls(
            fixture_id=int(fixture["id"]),
            kickoff_timestamp=timestamp,
            status=FixtureStatus.from_short((fixture.get("status") or {}).get("short")),
            home_team_name=str(teams["home"]["name"]),
            away_team_name=str(teams["away"]["name"]),
            home_score=_as_int(goals.get("home")),
            away_score=_as_int(goals.get("away")),
        )


@dataclass(frozen=True)
class ClubRecord:
    club_id: int
    name: str
    country: str | None = None
    venue_name: str | None = None
    venue_city: str | None = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "ClubRecord":
        """Build a record from one entry of the teams ``response`` list."""
        team = raw["team"]
        venue = raw.get("venue") or {}
        return cls(
            club_id=int(team["id"]),
            name=str(team["name"]),
            country=team.get("country"),
            venue_name=venue.get("name"),
            venue_city=venue.get("city"),
        )


def upstream_error_message(payload: Any) -> str:
    """Extract the upstream ``errors`` field as one message.

    The API reports errors either as an empty list or as an object such as
    ``{"token": "Error/Missing application key..."}``.

    Returns:
        "field - message" pairs joined with "; ", or "" when there is none.
    """
    if not isinstance(payload, dict):
        return ""

    errors = payload.get("errors")
    if isinstance(errors, dict):
        return "; ".join(f"{field} - {message}" for field, message in errors.items())
    if isinstance(errors, list):
        return "; ".join(str(error) for error in errors if error)
    if isinstance(errors, str):
        return errors
    return ""


def _response_entries(payload: Any, status: int) -> list[dict[str, Any]]:
    message = upstream_error_message(payload)
    if message:
        raise ApiError(status, message)

    if not isinstance(payload, dict) or not isinstance(payload.get("response"), list):
        raise ApiError(status, ERROR_UNEXPECTED_PAYLOAD)

    return payload["response"]


def parse_fixtures(payload: Any, status: int = 200) -> list[FixtureRecord]:
    """Decode a fixtures payload into records, keeping API order.

    Raises:
        ApiError: If the payload carries upstream errors or is malformed.
    """
    entries = _response_entries(payload, status)
    try:
        records = [FixtureRecord.from_api(entry) for entry in entries]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.debug(f"Malformed fixture entry: {e!r}")
        raise ApiError(status, ERROR_UNEXPECTED_PAYLOAD) from e

    logger.info(f"Decoded {len(records)} fixture(s)")
    return records


def parse_clubs(payload: Any, status: int = 200) -> list[ClubRecord]:
    """Decode a teams payload into club records.

    Raises:
        ApiError: If the payload carries upstream errors or is malformed.
    """
    entries = _response_entries(payload, status)
    try:
        return [ClubRecord.from_api(entry) for entry in entries]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.debug(f"Malformed team entry: {e!r}")
        raise ApiError(status, ERROR_UNEXPECTED_PAYLOAD) from e
