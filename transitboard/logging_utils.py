"""Logging utilities for Transitboard sessions.

Provides color-coded console output to distinguish accepted moves, rejected
moves and document problems.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Resolver / state machine internals
    YELLOW = "\033[93m"    # Rejected moves, skipped document entries
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Accepted transitions
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TRANSITBOARD_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TRANSITBOARD_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    return os.getenv("TRANSITBOARD_VERBOSE", "").strip().lower() in {"1", "true", "yes", "on"}


def log_debug(message: str) -> None:
    """Log a resolver/state-machine detail (blue). Printed only in verbose mode."""
    if verbose_enabled():
        print(colored(f"{LOG_TAG_DEBUG} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a rejected move or skipped entry (yellow)."""
    print(colored(f"{LOG_TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log an accepted transition (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_DEBUG = "[•]"
LOG_TAG_WARNING = "[?]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
