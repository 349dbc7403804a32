"""Model package for shellwizard."""

from shellwizard.models.answer import Answer
from shellwizard.models.run_outcome import RunOutcome, RunStatus
from shellwizard.models.wizard_config import (
    CACHE_FILE_NAME,
    DEFAULT_MODEL,
    WizardConfig,
    default_cache_file,
)

__all__ = [
    "Answer",
    "CACHE_FILE_NAME",
    "DEFAULT_MODEL",
    "RunOutcome",
    "RunStatus",
    "WizardConfig",
    "default_cache_file",
]
