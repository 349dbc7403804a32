"""Pull runnable shell commands out of a model response."""

import logging
import re

log = logging.getLogger(__name__)

SHELL_TAGS = frozenset({"bash", "sh", "zsh"})

# A fence opens with ``` at the start of a line, optionally followed by a
# language tag, and closes at the next line that starts with ```. Body lines
# never start with ```, so an unclosed fence matches nothing.
FENCE_RE = re.compile(
    r"^```[ \t]*(?P<tag>[\w+.-]*)[^\n]*\n(?P<body>(?:(?!```)[^\n]*\n)*)```",
    re.MULTILINE,
)


def is_shell_tag(tag: str) -> bool:
    """Return whether a fence language tag denotes a shell block."""
    return not tag or tag.lower() in SHELL_TAGS


def extract_commands(text: str) -> list[str]:
    """Return the trimmed bodies of shell-tagged or untagged fenced blocks, in order."""
    commands: list[str] = []
    for match in FENCE_RE.finditer(text):
        tag = match.group("tag")
        if not is_shell_tag(tag):
            log.debug("skipping fenced block tagged %r", tag)
            continue
        block = match.group("body").strip()
        if block:
            commands.append(block)
    log.debug("extracted %d command(s)", len(commands))
    return commands
