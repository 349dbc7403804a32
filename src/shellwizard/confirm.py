"""Ask the user before running suggested commands, then run them in order."""

import logging
import os
import subprocess
import sys
from typing import Protocol, TextIO

from shellwizard.errors import ExecutionError
from shellwizard.models import RunOutcome, RunStatus
from shellwizard.style import BOLD_GREEN, BOLD_RED, BOLD_YELLOW, paint

log = logging.getLogger(__name__)

TTY_DEVICE = "/dev/tty"
DEFAULT_SHELL = "sh"
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


class InteractiveReader(Protocol):
    """Source of the user's confirmation line."""

    def readline(self) -> str: ...

    def close(self) -> None: ...


class TerminalReader:
    """Read from the controlling terminal, bypassing a possibly piped stdin.

    Falls back to stdin when the terminal device cannot be opened.
    """

    def __init__(self, device: str = TTY_DEVICE, fallback: TextIO | None = None) -> None:
        self._owned = True
        try:
            self._stream: TextIO = open(device, encoding="utf-8", errors="replace")
        except OSError as e:
            log.debug("could not open %s (%s), reading from stdin", device, e)
            self._stream = fallback if fallback is not None else sys.stdin
            self._owned = False

    def readline(self) -> str:
        return self._stream.readline()

    def close(self) -> None:
        if self._owned:
            self._stream.close()


def is_affirmative(answer: str) -> bool:
    """Return whether a confirmation line means "yes"."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def resolve_shell(shell: str | None = None) -> str:
    """Return the shell used to run confirmed commands."""
    return shell or os.environ.get("SHELL") or DEFAULT_SHELL


def run_command(command: str, shell: str) -> None:
    """Run one command line through `shell -c`, attached to this terminal."""
    log.debug("running %r with %s", command, shell)
    try:
        result = subprocess.run([shell, "-c", command], check=False)
    except OSError as e:
        raise ExecutionError(command, cause=e) from e
    if result.returncode != 0:
        raise ExecutionError(command, returncode=result.returncode)


def _read_decision(reader: InteractiveReader) -> bool:
    try:
        answer = reader.readline()
    except KeyboardInterrupt:
        return False
    return is_affirmative(answer)


def present_commands(commands: list[str], stream: TextIO) -> None:
    """Print the numbered list of suggested commands."""
    print(paint("SUGGESTED COMMAND(S):", BOLD_YELLOW, stream), file=stream)
    for i, command in enumerate(commands, start=1):
        print(f"[{i}] {command}", file=stream)


def confirm_and_run(
    commands: list[str],
    reader: InteractiveReader,
    shell: str | None = None,
    stream: TextIO | None = None,
) -> RunOutcome:
    """Show the commands, ask once, and run them in order until one fails."""
    out = stream if stream is not None else sys.stdout
    present_commands(commands, out)
    question = paint("Do you want to execute these commands? [y/N]: ", BOLD_YELLOW, out)
    print(f"\n{question}", end="", file=out, flush=True)

    if not _read_decision(reader):
        print("Aborted.", file=out)
        return RunOutcome(status=RunStatus.ABORTED)

    executable = resolve_shell(shell)
    executed: list[str] = []
    for command in commands:
        print(f"\n{paint('Executing:', BOLD_GREEN, out)} {command}", file=out, flush=True)
        try:
            run_command(command, executable)
        except ExecutionError as e:
            print(f"{paint('Command failed:', BOLD_RED, out)} {e}", file=out)
            return RunOutcome(
                status=RunStatus.FAILED,
                executed=executed,
                failed_command=e.command,
                returncode=e.returncode,
                error=str(e),
            )
        executed.append(command)

    return RunOutcome(status=RunStatus.COMPLETED, executed=executed)
