"""api-football.com client built on an explicitly passed aiohttp session."""

import json
import logging
from typing import Any

import aiohttp

from config.constants import (
    API_KEY_HEADERS,
    DEFAULT_API_ENDPOINT,
    DEFAULT_API_PATH,
    ERROR_INVALID_JSON,
    ERROR_NETWORK,
    TEAMS_API_PATH,
)
from core.errors import ApiError, NetworkError
from core.fixtures.models import (
    ClubRecord,
    FixtureRecord,
    parse_clubs,
    parse_fixtures,
    upstream_error_message,
)

logger = logging.getLogger(__name__)


def fixture_params(club_id: int, want_next: bool) -> dict[str, str]:
    """Build the fixtures query for one club.

    The upstream rejects ``live`` combined with ``next``, so exactly one of
    them is sent.
    """
    if want_next:
        return {"team": str(club_id), "next": "1"}
    return {"team": str(club_id), "live": "all"}


class FootballApi:
    """Client for the api-football.com v3 endpoints used by the CLI.

    The session is owned by the caller, which creates it with a request
    timeout and closes it at exit.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        api_endpoint: str = DEFAULT_API_ENDPOINT,
        api_path: str = DEFAULT_API_PATH,
    ):
        self.session = session
        self.api_key = api_key
        self.api_endpoint = api_endpoint
        self.api_path = api_path

    def _url(self, path: str) -> str:
        return f"https://{self.api_endpoint}/{path}"

    def _headers(self) -> dict[str, str]:
        return {header: self.api_key for header in API_KEY_HEADERS}

    async def _get_json(self, path: str, params: dict[str, str]) -> tuple[int, Any]:
        """Run one GET request and decode the JSON body.

        Returns:
            Tuple of (HTTP status, decoded payload).

        Raises:
            ApiError: On a non-2xx status or a body that is not JSON.
            NetworkError: On transport failures and timeouts.
        """
        url = self._url(path)
        logger.info(f"GET {url} {params}", extra={"endpoint": url})

        try:
            async with self.session.get(
                url, params=params, headers=self._headers()
            ) as response:
                status = response.status
                body = await response.read()
                reason = response.reason or ""
        except aiohttp.ClientError as e:
            logger.debug(f"Request to {url} failed: {e!r}")
            raise NetworkError(f"{ERROR_NETWORK}: {e}") from e
        except TimeoutError as e:
            logger.debug(f"Request to {url} timed out")
            raise NetworkError(f"{ERROR_NETWORK}: timed out") from e

        logger.debug(
            f"Response {status} ({len(body)} bytes)",
            extra={"endpoint": url, "status": status},
        )

        try:
            payload = json.loads(body)
        except ValueError as e:
            # JSONDecodeError or UnicodeDecodeError
            if not 200 <= status < 300:
                raise ApiError(status, reason) from e
            raise ApiError(status, ERROR_INVALID_JSON) from e

        if not 200 <= status < 300:
            raise ApiError(status, upstream_error_message(payload) or reason)

        return status, payload

    async def fetch_fixtures(self, club_id: int, want_next: bool) -> list[FixtureRecord]:
        """Get the fixtures of one club, live ones or the next scheduled one.

        Args:
            club_id: Upstream club ID.
            want_next: Ask for the next fixture instead of live ones.

        Returns:
            Records in API order.
        """
        params = fixture_params(club_id, want_next)
        status, payload = await self._get_json(self.api_path, params)
        return parse_fixtures(payload, status)

    async def lookup_club(self, name: str) -> list[ClubRecord]:
        """Search clubs by name."""
        status, payload = await self._get_json(TEAMS_API_PATH, {"name": name})
        return parse_clubs(payload, status)

    async def get_club(self, club_id: int) -> ClubRecord | None:
        """Get one club by ID, or None when the API knows no such club."""
        status, payload = await self._get_json(TEAMS_API_PATH, {"id": str(club_id)})
        clubs = parse_clubs(payload, status)
        return clubs[0] if clubs else None
