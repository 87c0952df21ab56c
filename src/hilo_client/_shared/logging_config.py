# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
hilo_client._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides error logging and termination functions.
Console mode suppresses standard logs on the terminal so they do not
interleave with the operator's prompts.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import HiLoClientError

# Package logger
logger = logging.getLogger("hilo_client")

# Flag to control operator-only terminal output
_console_mode_enabled = False


class ConsoleFilter(logging.Filter):
    """Filter that suppresses terminal logs while console mode is enabled.

    In console mode the operator display owns the terminal; records still
    reach the log file.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _console_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type:
            log_data["error_type"] = error_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "hilo_client.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'hilo_client.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("hilo_client")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ConsoleFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_error_block(error: "HiLoClientError") -> None:
    """
    Print an error's structured block to stderr and record it in the log.

    Parameters
    ----------
    error : HiLoClientError
        An error providing format_error_log().
    """
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )


def log_and_terminate(error: "HiLoClientError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : HiLoClientError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_error_block(error)
    logger.critical("Process terminated due to fatal error")
    sys.exit(exit_code)


def enable_console_mode() -> None:
    """
    Enable console mode.

    In console mode:
    - Standard logs are suppressed from the terminal
    - Only operator display lines and prompts are shown
    - File logging remains unchanged for debugging
    """
    global _console_mode_enabled
    _console_mode_enabled = True


def disable_console_mode() -> None:
    """Disable console mode (restore terminal logging)."""
    global _console_mode_enabled
    _console_mode_enabled = False
