"""Immutable constants for the footballscore CLI."""

# api-football.com v3
DEFAULT_API_ENDPOINT = "v3.football.api-sports.io"
DEFAULT_API_PATH = "fixtures"
TEAMS_API_PATH = "teams"
API_KEY_HEADERS = ("x-apisports-key", "x-rapidapi-key")

# 529 - Barcelona
DEFAULT_CLUB_ID = 529
MAX_CLUB_ID = 65535

TIMEZONE = "UTC"

# Request timeout in seconds, status-bar callers must not block for long
REQUEST_TIMEOUT = 10.0
MIN_REQUEST_TIMEOUT = 5.0
MAX_REQUEST_TIMEOUT = 15.0

# Upstream short status codes
SCHEDULED_CODES = frozenset({"TBD", "NS"})
LIVE_CODES = frozenset({"1H", "HT", "2H", "ET", "BT", "P", "SUSP", "INT", "LIVE"})
FINISHED_CODES = frozenset({"FT", "AET", "PEN"})
POSTPONED_CODES = frozenset({"PST"})

# Literal values accepted by --next-match / NEXT_MATCH
TRUE_VALUES = frozenset({"1", "true"})
FALSE_VALUES = frozenset({"0", "false"})

# Process exit codes
EXIT_OK = 0
EXIT_INVALID_ARGUMENT = 2
EXIT_MISSING_CREDENTIAL = 3
EXIT_CLUB_NOT_FOUND = 4
EXIT_API_ERROR = 5
EXIT_NETWORK_ERROR = 6

# Output templates
MATCH_LINE = "Match: {home} {home_score} vs {away_score} {away}"
NEXT_MATCH_LINE = "Match: {home} vs {away} on {kickoff}"
KICKOFF_FORMAT = "ddd D MMM HH:mm"
NO_LIVE_MATCH = "Match: no live event"
NO_UPCOMING_MATCH = "Match: no upcoming match"
CLUB_UNAVAILABLE = "Club: data unavailable"

# Error messages
ERROR_MISSING_API_KEY = (
    "No API key found. Pass -k/--api-key or set the API_KEY "
    "environment variable."
)
ERROR_NETWORK = "Network request failed"
ERROR_INVALID_JSON = "Response body is not valid JSON"
ERROR_UNEXPECTED_PAYLOAD = "Unexpected response structure"
