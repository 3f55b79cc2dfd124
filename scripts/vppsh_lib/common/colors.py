"""
Terminal diagnostics for vppsh.

vppsh output is relayed by the host shell, which may hand it to a pager or
a log instead of a terminal. Status prefixes are coloured only when stdout
is a terminal and NO_COLOR is unset.
"""

import os
import sys


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # Reset


def use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def paint(code: str, text: str) -> str:
    """Wrap text in a color code when writing to a terminal."""
    if use_color():
        return f"{code}{text}{Colors.NC}"
    return text


def log(msg: str) -> None:
    """A change was applied."""
    print(f"{paint(Colors.GREEN, '[+]')} {msg}")


def warn(msg: str) -> None:
    print(f"{paint(Colors.YELLOW, '[!]')} {msg}")


def error(msg: str) -> None:
    """A command failed; printed to stdout so the host shell shows it in order."""
    print(f"{paint(Colors.RED, '[ERROR]')} {msg}")


def info(msg: str) -> None:
    print(f"{paint(Colors.CYAN, '[i]')} {msg}")
