"""Pick the one fixture worth reporting."""

import logging
from collections.abc import Sequence
from datetime import datetime

from core.fixtures.models import FixtureRecord, FixtureStatus
from core.utils.date_parser import to_timestamp

logger = logging.getLogger(__name__)


def select_next(records: Sequence[FixtureRecord], now: int) -> FixtureRecord | None:
    """Earliest scheduled fixture strictly after ``now``.

    Fixtures sharing a kickoff keep API order.
    """
    upcoming = [
        record
        for record in records
        if record.status is FixtureStatus.SCHEDULED and record.kickoff_timestamp > now
    ]
    if not upcoming:
        return None
    # min() returns the first of equal keys
    return min(upcoming, key=lambda record: record.kickoff_timestamp)


def select_current(records: Sequence[FixtureRecord], now: int) -> FixtureRecord | None:
    """First live fixture, else the latest finished one not after ``now``."""
    for record in records:
        if record.status is FixtureStatus.LIVE:
            return record

    finished = [
        record
        for record in records
        if record.status is FixtureStatus.FINISHED and record.kickoff_timestamp <= now
    ]
    if not finished:
        return None
    return max(finished, key=lambda record: record.kickoff_timestamp)


def select_match(
    records: Sequence[FixtureRecord],
    want_next: bool,
    now: datetime | int | None = None,
) -> FixtureRecord | None:
    """Choose the fixture to display.

    Args:
        records: Fixtures in API order.
        want_next: Report the next scheduled fixture instead of the
            live/latest one.
        now: Reference moment, defaults to the current time.

    Returns:
        The selected fixture, or None when nothing qualifies (off-season,
        no live match). None is a valid outcome, not an error.
    """
    reference = to_timestamp(now)
    if want_next:
        selected = select_next(records, reference)
    else:
        selected = select_current(records, reference)

    if selected is None:
        logger.info(f"No fixture selected out of {len(records)}")
    else:
        logger.info(f"Selected fixture {selected.fixture_id} ({selected.status.value})")
    return selected
