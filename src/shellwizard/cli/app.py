"""Top-level CLI entry point."""

import logging
import sys
from typing import TextIO

from shellwizard.cli.shared import USAGE, format_response
from shellwizard.config import is_debug_enabled, load_config
from shellwizard.confirm import InteractiveReader, TerminalReader, confirm_and_run
from shellwizard.errors import ConfigError, ServiceError
from shellwizard.llm import CompletionClient, LiteLLMClient
from shellwizard.wizard import read_piped_input, run

log = logging.getLogger("shellwizard")


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    client: CompletionClient | None = None,
    reader: InteractiveReader | None = None,
) -> int:
    """Answer a question about the terminal and offer to run suggested commands."""
    args = list(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if is_debug_enabled() else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    question = " ".join(args).strip()
    piped_context = read_piped_input(stdin if stdin is not None else sys.stdin)
    # Usage is shown before the API key is checked: nothing to ask is not an error.
    if not question and not piped_context:
        print(USAGE)
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if client is None:
        client = LiteLLMClient(config)

    try:
        answer = run(question, piped_context, config, client)
    except ServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if answer is None:
        print(USAGE)
        return 0

    print(format_response(answer.text, sys.stdout))

    if not answer.commands:
        return 0

    if reader is None:
        reader = TerminalReader()
    try:
        outcome = confirm_and_run(answer.commands, reader, shell=config.shell)
    finally:
        reader.close()
    log.debug("confirmation run finished: %s", outcome.status.value)
    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
