"""Simple console output helpers for the civix generator CLI."""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'


def _use_color() -> bool:
    """Color only interactive terminals, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def _paint(msg: str, *codes: str) -> str:
    if not _use_color():
        return msg
    return f"{''.join(codes)}{msg}{Colors.RESET}"


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(f"✓ {msg}", Colors.GREEN))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(f"⊘ {msg}", Colors.YELLOW))


def print_error(msg: str) -> None:
    """Print an error message."""
    print(_paint(f"❌ {msg}", Colors.RED))
