"""Logging utilities for gardenwalk.

Provides color-coded console output so BFS/analysis diagnostics, results and
errors are easy to tell apart when running the CLI.
"""

import os
import sys
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Deterministic computations (BFS, classification)
    RED = "\033[91m"       # Errors and precondition failures
    GREEN = "\033[92m"     # Results
    CYAN = "\033[96m"      # Info/metadata
    GREY = "\033[90m"      # Verbose diagnostics

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
        Colorized text if GARDENWALK_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GARDENWALK_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    return os.getenv("GARDENWALK_VERBOSE", "").strip().lower() in {"1", "true", "yes", "on"}


def log_deterministic(message: str) -> None:
    """Log a deterministic computation step (blue). Verbose only."""
    if verbose_enabled():
        print(colored(f"{TAG_DETERMINISTIC} {message}", Color.BLUE))


def log_debug(message: str) -> None:
    """Log a diagnostic detail (grey). Verbose only."""
    if verbose_enabled():
        print(colored(f"{TAG_INFO} {message}", Color.GREY))


def log_error(message: str) -> None:
    """Log an error (red) to stderr."""
    print(colored(f"{TAG_ERROR} {message}", Color.RED), file=sys.stderr)


def log_success(message: str) -> None:
    """Log a result (green)."""
    print(colored(f"{TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
TAG_DETERMINISTIC = "[•]"
TAG_ERROR = "[!]"
TAG_SUCCESS = "[✓]"
TAG_INFO = "[i]"
