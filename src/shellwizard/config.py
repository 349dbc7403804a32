"""Configuration for shellwizard, read from the environment."""

import logging
import os
from pathlib import Path

from shellwizard.errors import ConfigError
from shellwizard.models import DEFAULT_MODEL, WizardConfig, default_cache_file

log = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_SHELL_API_KEY"
MODEL_ENV = "SHELLWIZARD_MODEL"
CACHE_FILE_ENV = "SHELLWIZARD_CACHE_FILE"
DEBUG_ENV = "SHELLWIZARD_DEBUG"


def is_debug_enabled() -> bool:
    """Return whether debug logging was requested via the environment."""
    return os.environ.get(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}


def get_model() -> str:
    """Return the LLM model identifier from env or default."""
    return os.environ.get(MODEL_ENV, "").strip() or DEFAULT_MODEL


def get_cache_file() -> Path:
    """Return the environment cache path from env or default."""
    override = os.environ.get(CACHE_FILE_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return default_cache_file()


def load_config() -> WizardConfig:
    """Build the runtime config, failing when no API key is available."""
    api_key = os.environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable not set.")

    config = WizardConfig(
        api_key=api_key,
        model=get_model(),
        cache_file=get_cache_file(),
        shell=os.environ.get("SHELL") or None,
    )
    log.debug("model=%s cache_file=%s shell=%s", config.model, config.cache_file, config.shell)
    return config
