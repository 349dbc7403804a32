"""Configuration model for shellwizard."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gemini/gemini-2.0-flash"
CACHE_FILE_NAME = ".gemini-env"


def default_cache_file() -> Path:
    """Return the per-user environment cache path."""
    return Path.home() / CACHE_FILE_NAME


class WizardConfig(BaseModel):
    """Runtime configuration for shellwizard."""

    api_key: str
    model: str = DEFAULT_MODEL
    cache_file: Path = Field(default_factory=default_cache_file)
    shell: str | None = None
