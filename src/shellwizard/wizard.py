"""Core logic for shellwizard."""

import logging
from typing import TextIO

from shellwizard.context import get_environment
from shellwizard.extract import extract_commands
from shellwizard.llm import CompletionClient
from shellwizard.models import Answer, WizardConfig
from shellwizard.prompt import build_prompt

log = logging.getLogger("shellwizard")


def read_piped_input(stdin: TextIO) -> str:
    """Return all of stdin when it is piped, or an empty string for a terminal.

    Undecodable bytes are replaced rather than rejected.
    """
    if stdin.isatty():
        return ""
    buffer = getattr(stdin, "buffer", None)
    if buffer is not None:
        content = buffer.read().decode("utf-8", errors="replace")
    else:
        content = stdin.read()
    log.debug("read %d chars of piped input", len(content))
    return content


def ask(prompt: str, client: CompletionClient) -> Answer:
    """Send the prompt and pull any shell commands out of the reply."""
    text = client.complete(prompt)
    return Answer(text=text, commands=extract_commands(text))


def run(
    question: str, piped_context: str, config: WizardConfig, client: CompletionClient
) -> Answer | None:
    """Run the pipeline: describe the host, build the prompt, query the model.

    Returns None when there is neither a question nor piped input.
    """
    env_text = get_environment(config.cache_file)
    prompt = build_prompt(question, piped_context, env_text)
    if prompt is None:
        return None
    log.debug("prompt=%d chars", len(prompt))
    return ask(prompt, client)
