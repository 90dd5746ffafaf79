"""footballscore - Main entry point.

Prints a one-line summary of a football club's live, latest or next match
from api-football.com, for shell status bars.
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime

import aiohttp

from config import settings
from config.constants import DEFAULT_CLUB_ID, EXIT_OK
from core.errors import FootballScoreError, InvalidArgument
from core.fixtures import (
    FootballApi,
    format_club,
    format_match,
    format_no_match,
    select_match,
)
from core.logging_config import configure_logging, verbosity_to_level
from core.resolver import Configuration, resolve_club, resolve_configuration

__version__ = "0.3.0"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser.

    Flag values are kept as raw strings, validation happens in the
    resolver so that environment values go through the same checks.
    """
    parser = argparse.ArgumentParser(
        prog="footballscore",
        description=(
            "Retrieve football match information from api-football.com. "
            f"Without a club, {DEFAULT_CLUB_ID} (Barcelona) is assumed."
        ),
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-k",
        "--api-key",
        help="API key (either this or the API_KEY environment variable must exist)",
    )
    parser.add_argument(
        "-c", "--club-id", help="Club ID (default: CLUB_ID or 529 - Barcelona)"
    )
    parser.add_argument(
        "-n", "--club-name", help="Club name, looked up when no club ID is given"
    )
    parser.add_argument(
        "--next-match",
        metavar="{0,1}",
        help="Show the next match instead of the live one, 1 = true, 0 = false",
    )
    parser.add_argument(
        "--club-info",
        action="store_true",
        help="Show club information instead of a match",
    )
    parser.add_argument(
        "--timezone", help="Timezone used for kickoff times (default: UTC)"
    )
    parser.add_argument(
        "--no-match-exit-code",
        metavar="CODE",
        help="Exit code used when no match is found (default: 0)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug)",
    )
    return parser


async def report(
    config: Configuration,
    session: aiohttp.ClientSession,
    now: datetime | int | None = None,
) -> tuple[str, int]:
    """Fetch, select and format the output line.

    Returns:
        Tuple of (output line, exit code).
    """
    api = FootballApi(session, config.api_key, config.api_endpoint, config.api_path)
    config = await resolve_club(config, api)

    if config.club_info:
        club = await api.get_club(config.club_id)
        if club is None:
            return format_club(None), config.no_match_exit_code
        return format_club(club), EXIT_OK

    records = await api.fetch_fixtures(config.club_id, config.next_match)
    selected = select_match(records, config.next_match, now)

    if selected is None:
        return format_no_match(config.next_match), config.no_match_exit_code
    return format_match(selected, config.timezone), EXIT_OK


async def run(
    argv: list[str] | None = None,
    session: aiohttp.ClientSession | None = None,
    now: datetime | int | None = None,
) -> int:
    """Run the CLI once.

    Args:
        argv: Arguments without the program name, defaults to sys.argv.
        session: Session to use; a new one is created and closed otherwise.
        now: Reference moment for match selection.

    Returns:
        Process exit code.
    """
    settings.load()
    parser = build_parser()
    args = parser.parse_args(argv)

    level = verbosity_to_level(args.verbose, settings.get("LOG_LEVEL", "WARNING"))

    try:
        configure_logging(level, settings.get("LOG_FILE"))
        config = resolve_configuration(args)

        if session is not None:
            line, exit_code = await report(config, session, now)
        else:
            timeout = aiohttp.ClientTimeout(total=config.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as own_session:
                line, exit_code = await report(config, own_session, now)

    except FootballScoreError as e:
        logger.debug(f"{type(e).__name__}: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, InvalidArgument):
            print(parser.format_usage(), end="", file=sys.stderr)
        return e.exit_code

    print(line)
    return exit_code


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
