"""Error taxonomy for the footballscore CLI.

Every error is terminal for the invocation. The entry point maps each class
to its own process exit code.
"""

from config.constants import (
    EXIT_API_ERROR,
    EXIT_CLUB_NOT_FOUND,
    EXIT_INVALID_ARGUMENT,
    EXIT_MISSING_CREDENTIAL,
    EXIT_NETWORK_ERROR,
)


class FootballScoreError(Exception):
    """Base class for all errors reported to the user."""

    exit_code = 1


class InvalidArgument(FootballScoreError):
    """A flag or environment value is malformed."""

    exit_code = EXIT_INVALID_ARGUMENT


class MissingCredential(FootballScoreError):
    """No API key could be resolved."""

    exit_code = EXIT_MISSING_CREDENTIAL


class ClubNotFound(FootballScoreError):
    """A club name did not resolve to exactly one club ID."""

    exit_code = EXIT_CLUB_NOT_FOUND


class ApiError(FootballScoreError):
    """The API answered with an error status or an unusable body."""

    exit_code = EXIT_API_ERROR

    def __init__(self, status: int, message: str = ""):
        self.status = status
        self.message = message
        super().__init__(
            f"API error {status}: {message}" if message else f"API error {status}"
        )


class NetworkError(FootballScoreError):
    """Transport failure: DNS, refused connection, timeout."""

    exit_code = EXIT_NETWORK_ERROR
