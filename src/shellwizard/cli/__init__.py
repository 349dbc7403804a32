"""Command-line interface for shellwizard."""

from shellwizard.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
