"""Logging configuration for the CLI.

Console logs go to stderr so stdout only ever carries the result line.
"""

import json
import logging
import logging.handlers
import sys
from datetime import UTC, datetime

from core.errors import InvalidArgument

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Extra fields copied into structured records when present
EXTRA_FIELDS = ("club_id", "endpoint", "status")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON for easier parsing with tools like jq or
    grep when the CLI runs unattended from a status bar.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def verbosity_to_level(verbosity: int, default: str = "WARNING") -> int:
    """Map the number of -v flags to a logging level.

    Args:
        verbosity: Count of -v flags.
        default: Level name used when no -v flag was given.

    Returns:
        Numeric logging level.
    """
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO

    level = logging.getLevelName(default.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int, log_file: str | None = None) -> None:
    """Install console and optional rotating JSON file handlers.

    Args:
        level: Logging level for all handlers.
        log_file: Path of a JSON log file, or None for console only.

    Raises:
        InvalidArgument: If the log file cannot be opened.
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10_000_000,  # 10MB
                backupCount=5,
            )
        except OSError as e:
            raise InvalidArgument(f"Cannot open LOG_FILE {log_file!r}: {e}") from e
        file_handler.setLevel(level)
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
