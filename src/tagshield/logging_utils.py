"""Custom logging utilities for the TagShield application."""

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

DEFAULT_LOG_FILE = "tagshield_debug.log"


def _format_utc_time(formatter: logging.Formatter, record: logging.LogRecord, datefmt: str | None) -> str:
    """Format the time with 6-digit microseconds and a 'Z' for UTC."""
    ct = formatter.converter(record.created)
    s = time.strftime(datefmt, ct) if datefmt else time.strftime(formatter.default_time_format, ct)
    microseconds = int((record.created - int(record.created)) * 1_000_000)
    return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(logging.Formatter):
    """A custom formatter for console output to provide clean, user-friendly logs."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The TagShield application version.

        """
        super().__init__(
            fmt=f"%(asctime)s | TagShield - {version} | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        return _format_utc_time(self, record, datefmt)


# File Log Formatter
class FileFormatter(logging.Formatter):
    """A detailed formatter for debug log files, aimed at developers."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__(
            fmt="%(asctime)s | %(name)-20s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        return _format_utc_time(self, record, datefmt)


def setup_logging(version: str, *, debug: bool = False, log_file: str | Path | None = None) -> None:
    """
    Configure the root logger for the TagShield application.

    This function sets up a dual-logging system:
    1.  Console: User-facing messages. Level is INFO by default, DEBUG if debug=True.
    2.  File (DEBUG): Developer-facing, detailed logs written to `log_file`
        (default 'tagshield_debug.log') when debug=True.

    Args:
        version: The application version, included in console logs.
        debug: If True, enables detailed file logging and sets console level to DEBUG.
        log_file: Where to write the debug log.

    """
    root_logger = logging.getLogger()
    # Clear any handlers created by basicConfig or previous setups
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if not debug:
        return

    log_file_path = Path(log_file or DEFAULT_LOG_FILE)
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        # --- File Handler (DEBUG) ---
        file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        root_logger.addHandler(file_handler)

        # Use the root logger to announce debug mode, so it appears on all handlers
        root_logger.info(
            "Debug mode enabled. Console level set to DEBUG. Detailed logs will be written to %s",
            log_file_path,
        )
    except OSError:
        # If creating the log file fails, continue with console logging.
        root_logger.exception("Failed to create debug log file. Continuing with console logging only.")
