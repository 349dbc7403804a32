"""Shared CLI presentation helpers."""

from typing import TextIO

from shellwizard.style import BOLD_BLUE, paint

USAGE = (
    "Usage: command | shellwizard [question]\n"
    "   or: shellwizard [question]"
)
RESPONSE_LABEL = "Gemini:"


def format_response(text: str, stream: TextIO | None = None) -> str:
    """Return the labeled model response block."""
    return f"\n{paint(RESPONSE_LABEL, BOLD_BLUE, stream)} {text}\n"
