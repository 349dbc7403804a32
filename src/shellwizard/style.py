"""Terminal styling helpers."""

import os
import sys
from typing import TextIO

RESET = "\033[0m"
BOLD_RED = "\033[1;31m"
BOLD_GREEN = "\033[1;32m"
BOLD_YELLOW = "\033[1;33m"
BOLD_BLUE = "\033[1;34m"


def supports_color(stream: TextIO | None = None) -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    target = stream if stream is not None else sys.stdout
    return hasattr(target, "isatty") and target.isatty()


def paint(text: str, color: str, stream: TextIO | None = None) -> str:
    """Wrap text in an ANSI color when the stream supports it."""
    if supports_color(stream):
        return f"{color}{text}{RESET}"
    return text
