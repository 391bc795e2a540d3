"""Colored console logging for the valhalla-client command-line tool."""
from __future__ import annotations
import logging
import os
import sys
from typing import Union


def _supports_ansi() -> bool:
    """Detect if the terminal supports ANSI escape codes."""
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    # Logs go to stderr, keep stdout clean for JSON output
    if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


_ANSI_SUPPORTED = _supports_ansi()


class LogColors:
    """ANSI color codes, empty when the terminal does not support them."""
    RESET = '\033[0m' if _ANSI_SUPPORTED else ''
    BOLD = '\033[1m' if _ANSI_SUPPORTED else ''
    DEBUG = '\033[36m' if _ANSI_SUPPORTED else ''      # Cyan
    INFO = '\033[32m' if _ANSI_SUPPORTED else ''       # Green
    WARNING = '\033[33m' if _ANSI_SUPPORTED else ''    # Yellow
    ERROR = '\033[31m' if _ANSI_SUPPORTED else ''      # Red
    CRITICAL = '\033[35m' if _ANSI_SUPPORTED else ''   # Magenta
    MODULE = '\033[94m' if _ANSI_SUPPORTED else ''     # Blue


class ColoredFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] logger - message`` with per-level colors."""

    _LEVEL_COLORS = {
        'DEBUG': LogColors.DEBUG,
        'INFO': LogColors.INFO,
        'WARNING': LogColors.WARNING,
        'ERROR': LogColors.ERROR,
        'CRITICAL': LogColors.CRITICAL,
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self._LEVEL_COLORS.get(record.levelname, LogColors.RESET)
        colored_levelname = f"{level_color}{LogColors.BOLD}[{record.levelname}]{LogColors.RESET}"
        colored_module = f"{LogColors.MODULE}{record.name}{LogColors.RESET}"
        formatted = f"{colored_levelname} {colored_module} - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"
        return formatted


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with colored output on stderr.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".

    Example:
        >>> from valhalla_client.logging_config import configure_logging
        >>> configure_logging("DEBUG")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)
    # Connection pool chatter - only show WARNING and above
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["LogColors", "ColoredFormatter", "configure_logging"]
