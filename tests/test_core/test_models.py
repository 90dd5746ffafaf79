"""Tests for core.fixtures.models module."""

import pytest

from conftest import NOW, club_entry, envelope, fixture_entry
from core.errors import ApiError
from core.fixtures.models import (
    ClubRecord,
    FixtureRecord,
    FixtureStatus,
    parse_clubs,
    parse_fixtures,
    upstream_error_message,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("NS", FixtureStatus.SCHEDULED),
        ("TBD", FixtureStatus.SCHEDULED),
        ("1H", FixtureStatus.LIVE),
        ("HT", FixtureStatus.LIVE),
        ("2H", FixtureStatus.LIVE),
        ("P", FixtureStatus.LIVE),
        ("FT", FixtureStatus.FINISHED),
        ("AET", FixtureStatus.FINISHED),
        ("PEN", FixtureStatus.FINISHED),
        ("PST", FixtureStatus.POSTPONED),
        ("CANC", FixtureStatus.OTHER),
        ("", FixtureStatus.OTHER),
        (None, FixtureStatus.OTHER),
    ],
)
def test_status_from_short(code, expected):
    """Test mapping of upstream short status codes."""
    assert FixtureStatus.from_short(code) is expected


def test_fixture_record_from_api():
    """Test decoding a finished fixture entry."""
    entry = fixture_entry(1038125, "Barcelona", "Girona", home_goals=2, away_goals=1)

    record = FixtureRecord.from_api(entry)

    assert record.fixture_id == 1038125
    assert record.kickoff_timestamp == NOW.subtract(days=1).int_timestamp
    assert record.status is FixtureStatus.FINISHED
    assert record.home_team_name == "Barcelona"
    assert record.away_team_name == "Girona"
    assert record.home_score == 2
    assert record.away_score == 1


def test_fixture_record_without_scores():
    """Test that scheduled fixtures decode with no scores."""
    entry = fixture_entry(1, "Barcelona", "Girona", short="NS", kickoff=NOW.add(days=2))

    record = FixtureRecord.from_api(entry)

    assert record.status is FixtureStatus.SCHEDULED
    assert record.home_score is None
    assert record.away_score is None


def test_fixture_record_falls_back_to_iso_date():
    """Test that a missing timestamp is derived from the ISO date."""
    entry = fixture_entry(1, "Barcelona", "Girona")
    del entry["fixture"]["timestamp"]

    record = FixtureRecord.from_api(entry)

    assert record.kickoff_timestamp == NOW.subtract(days=1).int_timestamp


def test_fixture_record_ignores_unknown_fields():
    """Test that extra fields in the payload are dropped."""
    entry = fixture_entry(1, "Barcelona", "Girona")
    entry["brand_new_section"] = {"anything": True}
    entry["fixture"]["new_field"] = 42

    record = FixtureRecord.from_api(entry)

    assert not hasattr(record, "brand_new_section")
    assert not hasattr(record, "league_name")
    assert not hasattr(record, "venue_name")
    assert record.fixture_id == 1


def test_parse_fixtures_keeps_order():
    """Test that parse_fixtures() keeps API order."""
    payload = envelope(
        [fixture_entry(2, "A", "B"), fixture_entry(1, "C", "D")]
    )

    records = parse_fixtures(payload)

    assert [record.fixture_id for record in records] == [2, 1]


def test_parse_fixtures_empty_response():
    """Test that an empty response list yields no records."""
    assert parse_fixtures(envelope([])) == []


def test_parse_fixtures_raises_on_upstream_errors():
    """Test that the errors object of a 200 response becomes an ApiError."""
    payload = envelope(
        [],
        errors={
            "token": "Error/Missing application key. Go to "
            "https://www.api-football.com/documentation-v3 to learn how to "
            "get your API application key."
        },
    )

    with pytest.raises(ApiError, match="token - Error/Missing application key") as exc:
        parse_fixtures(payload)

    assert exc.value.status == 200


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "fixtures",
        {"response": None},
        {"errors": []},
        envelope([{"fixture": {"id": 1}}]),
        envelope(["not a fixture"]),
    ],
)
def test_parse_fixtures_raises_on_malformed_payload(payload):
    """Test that unexpected structures raise ApiError."""
    with pytest.raises(ApiError, match="Unexpected response structure"):
        parse_fixtures(payload)


def test_upstream_error_message_variants():
    """Test extraction of the errors field in its different shapes."""
    assert upstream_error_message({"errors": []}) == ""
    assert upstream_error_message({"errors": {}}) == ""
    assert upstream_error_message({"errors": ["quota exceeded"]}) == "quota exceeded"
    assert upstream_error_message({"errors": "bad"}) == "bad"
    assert (
        upstream_error_message({"errors": {"requests": "limit reached", "access": "suspended"}})
        == "requests - limit reached; access - suspended"
    )
    assert upstream_error_message("plain text") == ""


def test_parse_clubs():
    """Test decoding teams entries."""
    clubs = parse_clubs(envelope([club_entry(529, "Barcelona")], get="teams"))

    assert clubs == [
        ClubRecord(
            club_id=529,
            name="Barcelona",
            country="Spain",
            venue_name="Estadi Olímpic Lluís Companys",
            venue_city="Barcelona",
        )
    ]


def test_parse_clubs_raises_on_missing_team():
    """Test that a teams entry without team data raises ApiError."""
    with pytest.raises(ApiError):
        parse_clubs(envelope([{"venue": {}}], get="teams"))
