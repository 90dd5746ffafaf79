"""One-line output formatters for status bars."""

from config.constants import (
    CLUB_UNAVAILABLE,
    KICKOFF_FORMAT,
    MATCH_LINE,
    NEXT_MATCH_LINE,
    NO_LIVE_MATCH,
    NO_UPCOMING_MATCH,
    TIMEZONE,
)
from core.fixtures.models import ClubRecord, FixtureRecord, FixtureStatus
from core.utils.date_parser import format_kickoff


def format_match(record: FixtureRecord, timezone: str = TIMEZONE) -> str:
    """Render a fixture as a single line.

    Scheduled fixtures show the kickoff time, everything else the score
    with missing goals shown as 0.

    Args:
        record: Selected fixture.
        timezone: Timezone used for the kickoff time.

    Returns:
        e.g. "Match: Barcelona 2 vs 1 Girona" or
        "Match: Barcelona vs Girona on Sat 19 Oct 16:15".
    """
    if record.status is FixtureStatus.SCHEDULED:
        return NEXT_MATCH_LINE.format(
            home=record.home_team_name,
            away=record.away_team_name,
            kickoff=format_kickoff(record.kickoff_timestamp, KICKOFF_FORMAT, timezone),
        )

    return MATCH_LINE.format(
        home=record.home_team_name,
        home_score=record.home_score or 0,
        away_score=record.away_score or 0,
        away=record.away_team_name,
    )


def format_no_match(want_next: bool) -> str:
    return NO_UPCOMING_MATCH if want_next else NO_LIVE_MATCH


def format_club(club: ClubRecord | None) -> str:
    """Render club information as a single line."""
    if club is None:
        return CLUB_UNAVAILABLE

    line = f"Club: {club.name} (ID {club.club_id})"
    if club.country:
        line += f", {club.country}"

    venue = ", ".join(part for part in (club.venue_name, club.venue_city) if part)
    if venue:
        line += f" - {venue}"
    return line
