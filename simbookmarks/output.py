"""Formatted output utilities."""

# ============================================================
# Imports
# ============================================================

import sys
from typing import TextIO


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'
    BOLD = '\033[1m'
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    GRAY = '\033[90m'


def _paint(text: str, color: str, stream: TextIO) -> str:
    """Wrap text in color codes when stream is a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return f"{color}{text}{Color.RESET}"
    return text


# ============================================================
# Output Functions
# ============================================================

def print_info(message: str) -> None:
    """Print an informational message."""
    print(message)


def print_header(message: str) -> None:
    """Print a file header in bold."""
    print(_paint(message, Color.BOLD, sys.stdout))


def print_error(message: str) -> None:
    """Print an error message to stderr with 'Error:' prefix."""
    print(_paint(f"Error: {message}", Color.RED, sys.stderr), file=sys.stderr)


def print_warning(message: str) -> None:
    """Print a warning message to stderr with 'Warning:' prefix."""
    print(_paint(f"Warning: {message}", Color.YELLOW, sys.stderr), file=sys.stderr)


def print_detail(message: str) -> None:
    """Print a verbose diagnostic line to stderr in gray."""
    print(_paint(message, Color.GRAY, sys.stderr), file=sys.stderr)


def print_usage(usage: str) -> None:
    """Print the one-line usage summary to stderr."""
    print(usage, file=sys.stderr)


def print_bookmark(title: str, url: str) -> None:
    """Print one bookmark as an indented title followed by its bracketed URL."""
    print(f"  {title}  {_paint(f'[{url}]', Color.GRAY, sys.stdout)}")


def print_result(status: str, display_path: str) -> None:
    """
    Print a file status line such as 'Edited <path>'.

    Args:
        status: Status label (e.g., "Edited", "Would edit")
        display_path: Short path of the bookmark file
    """
    print(f"{_paint(status, Color.GREEN, sys.stdout)} {display_path}")
