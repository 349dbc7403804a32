"""Model response with the commands found in it."""

from dataclasses import dataclass, field


@dataclass
class Answer:
    """Generated text and the shell commands extracted from it."""

    text: str
    commands: list[str] = field(default_factory=list)
