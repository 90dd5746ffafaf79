"""Resolve the effective configuration from flags, environment and defaults.

Precedence is CLI flag, then environment variable (including values loaded
from env files), then the built-in default.
"""

import argparse
import dataclasses
import logging
from dataclasses import dataclass

from config import settings
from config.constants import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_API_PATH,
    DEFAULT_CLUB_ID,
    EXIT_OK,
    ERROR_MISSING_API_KEY,
    REQUEST_TIMEOUT,
    TIMEZONE,
    TRUE_VALUES,
)
from config.validation import (
    validate_api_key,
    validate_bool_flag,
    validate_club_id,
    validate_exit_code,
    validate_timeout,
    validate_timezone,
)
from core.errors import ClubNotFound, InvalidArgument, MissingCredential
from core.fixtures.client import FootballApi
from core.fixtures.models import ClubRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    api_key: str
    club_id: int | None = DEFAULT_CLUB_ID
    club_name: str | None = None
    next_match: bool = False
    club_info: bool = False
    api_endpoint: str = DEFAULT_API_ENDPOINT
    api_path: str = DEFAULT_API_PATH
    timeout: float = REQUEST_TIMEOUT
    timezone: str = TIMEZONE
    no_match_exit_code: int = EXIT_OK


def _pick(flag: str | None, env_key: str) -> str | None:
    """CLI value when given, else the environment value."""
    if flag is not None:
        return flag
    return settings.get(env_key)


def _parse_club_id(value: str) -> int:
    value = value.strip()
    if not validate_club_id(value):
        raise InvalidArgument(f"Invalid club id {value!r}: expected an integer 1-65535")
    return int(value)


def _parse_bool(value: str, name: str) -> bool:
    if not validate_bool_flag(value):
        raise InvalidArgument(f"Invalid value {value!r} for {name}: expected 0 or 1")
    return value.strip().lower() in TRUE_VALUES


def _resolve_api_key(args: argparse.Namespace) -> str:
    api_key = _pick(args.api_key, "API_KEY")
    if api_key is None or not validate_api_key(api_key):
        raise MissingCredential(ERROR_MISSING_API_KEY)
    return api_key.strip()


def _resolve_club(args: argparse.Namespace) -> tuple[int | None, str | None]:
    """Pick club ID or club name.

    An explicit ID beats a name at the same level; a CLI name beats an
    environment ID.
    """
    if args.club_id is not None:
        return _parse_club_id(args.club_id), args.club_name
    if args.club_name is not None and args.club_name.strip():
        return None, args.club_name.strip()

    env_club_id = settings.get("CLUB_ID")
    if env_club_id is not None:
        return _parse_club_id(env_club_id), settings.get("CLUB_NAME")

    env_club_name = settings.get("CLUB_NAME")
    if env_club_name is not None:
        return None, env_club_name

    return DEFAULT_CLUB_ID, None


def resolve_configuration(args: argparse.Namespace) -> Configuration:
    """Merge parsed CLI arguments with the environment.

    Args:
        args: Namespace from the CLI parser, flag values kept as raw strings.

    Returns:
        Immutable configuration for this run.

    Raises:
        MissingCredential: If no API key is available.
        InvalidArgument: If a value is malformed.
    """
    api_key = _resolve_api_key(args)
    club_id, club_name = _resolve_club(args)

    next_match_raw = _pick(args.next_match, "NEXT_MATCH")
    next_match = False
    if next_match_raw is not None:
        next_match = _parse_bool(next_match_raw, "--next-match")

    timeout_raw = settings.get("REQUEST_TIMEOUT")
    if timeout_raw is not None and not validate_timeout(timeout_raw):
        raise InvalidArgument(
            f"Invalid REQUEST_TIMEOUT {timeout_raw!r}: expected 5-15 seconds"
        )

    timezone = _pick(args.timezone, "TIMEZONE") or TIMEZONE
    if not validate_timezone(timezone):
        raise InvalidArgument(f"Unknown timezone {timezone!r}")

    exit_code_raw = _pick(args.no_match_exit_code, "NO_MATCH_EXIT_CODE")
    if exit_code_raw is not None and not validate_exit_code(exit_code_raw):
        raise InvalidArgument(
            f"Invalid no-match exit code {exit_code_raw!r}: expected 0-255"
        )

    config = Configuration(
        api_key=api_key,
        club_id=club_id,
        club_name=club_name,
        next_match=next_match,
        club_info=bool(args.club_info),
        api_endpoint=settings.get("API_ENDPOINT", DEFAULT_API_ENDPOINT),
        api_path=settings.get("API_PATH", DEFAULT_API_PATH),
        timeout=float(timeout_raw) if timeout_raw is not None else REQUEST_TIMEOUT,
        timezone=timezone,
        no_match_exit_code=int(exit_code_raw) if exit_code_raw is not None else EXIT_OK,
    )
    logger.debug(
        f"Resolved configuration: club_id={config.club_id} "
        f"club_name={config.club_name} next_match={config.next_match}",
        extra={"club_id": config.club_id},
    )
    return config


def _choose_club(name: str, clubs: list[ClubRecord]) -> ClubRecord:
    if not clubs:
        raise ClubNotFound(f"No club found matching {name!r}")
    if len(clubs) == 1:
        return clubs[0]

    exact = [club for club in clubs if club.name.casefold() == name.casefold()]
    if len(exact) == 1:
        return exact[0]

    candidates = ", ".join(f"{club.name} ({club.club_id})" for club in clubs)
    raise ClubNotFound(
        f"Club name {name!r} is ambiguous: {candidates}. Use --club-id instead."
    )


async def resolve_club(config: Configuration, api: FootballApi) -> Configuration:
    """Turn a club name into a club ID through the teams endpoint.

    Returns the configuration unchanged when an ID is already known.

    Raises:
        ClubNotFound: If the name matches no club or several clubs.
    """
    if config.club_id is not None:
        return config

    clubs = await api.lookup_club(config.club_name or "")
    club = _choose_club(config.club_name or "", clubs)
    logger.info(
        f"Resolved club {config.club_name!r} to {club.club_id}",
        extra={"club_id": club.club_id},
    )
    return dataclasses.replace(config, club_id=club.club_id)
