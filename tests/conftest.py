"""Pytest configuration and shared fixtures."""

import json
import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pendulum
import pytest

from config import settings

ENV_KEYS = (
    "API_KEY",
    "CLUB_ID",
    "CLUB_NAME",
    "NEXT_MATCH",
    "API_ENDPOINT",
    "API_PATH",
    "REQUEST_TIMEOUT",
    "TIMEZONE",
    "NO_MATCH_EXIT_CODE",
    "LOG_LEVEL",
    "LOG_FILE",
)

NOW = pendulum.datetime(2025, 11, 25, 18, 0, tz="UTC")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and env files."""
    for key in ENV_KEYS:
        # setenv first so teardown also removes values loaded by dotenv
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setattr(settings, "env_path", tmp_path / ".env")
    monkeypatch.setattr(settings, "LOCAL_CONFIG_FILE", tmp_path / "config.env")
    monkeypatch.setattr(
        settings, "USER_CONFIG_FILE", tmp_path / "footballscore" / "config.env"
    )

    # run() reconfigures the root logger
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def now():
    """Fixed reference moment for match selection."""
    return NOW


def fixture_entry(
    fixture_id,
    home,
    away,
    short="FT",
    kickoff=None,
    home_goals=None,
    away_goals=None,
):
    """Build one entry of the fixtures ``response`` list."""
    kickoff = kickoff or NOW.subtract(days=1)
    return {
        "fixture": {
            "id": fixture_id,
            "referee": None,
            "timezone": "UTC",
            "date": kickoff.to_iso8601_string(),
            "timestamp": kickoff.int_timestamp,
            "venue": {"id": 19939, "name": "Estadi Olímpic Lluís Companys", "city": "Barcelona"},
            "status": {"long": "", "short": short, "elapsed": None},
        },
        "league": {"id": 140, "name": "La Liga", "country": "Spain", "season": 2025},
        "teams": {
            "home": {"id": 529, "name": home, "winner": None},
            "away": {"id": 547, "name": away, "winner": None},
        },
        "goals": {"home": home_goals, "away": away_goals},
        "score": {"halftime": {"home": None, "away": None}},
    }


def envelope(entries, errors=None, get="fixtures"):
    """Wrap entries in the api-football.com response envelope."""
    return {
        "get": get,
        "parameters": {"team": "529"},
        "errors": errors if errors is not None else [],
        "results": len(entries),
        "paging": {"current": 1, "total": 1},
        "response": entries,
    }


def club_entry(club_id, name, country="Spain"):
    """Build one entry of the teams ``response`` list."""
    return {
        "team": {"id": club_id, "name": name, "code": None, "country": country},
        "venue": {"id": 19939, "name": "Estadi Olímpic Lluís Companys", "city": "Barcelona"},
    }


def make_session(payload=None, status=200, reason="OK", body=None, error=None):
    """Create a mock aiohttp session answering every GET the same way.

    Args:
        payload: JSON-serializable body.
        status: HTTP status code.
        reason: HTTP reason phrase.
        body: Raw body, str or bytes, overrides payload.
        error: Exception raised when the request is sent.
    """
    if body is None:
        body = json.dumps(payload)
    if isinstance(body, str):
        body = body.encode()

    response = MagicMock()
    response.status = status
    response.reason = reason
    response.read = AsyncMock(return_value=body)

    request = MagicMock()
    if error is not None:
        request.__aenter__ = AsyncMock(side_effect=error)
    else:
        request.__aenter__ = AsyncMock(return_value=response)
    request.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=request)
    return session


@pytest.fixture
def write_env_file(tmp_path):
    """Write an env file and return its path."""

    def _write(lines: list[str], name: str = "config.env") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
