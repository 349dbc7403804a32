"""LLM interaction for shellwizard."""

import logging
from typing import Protocol, TypedDict

import litellm

from shellwizard.errors import ServiceError
from shellwizard.models import WizardConfig

log = logging.getLogger(__name__)

# Suppress litellm's noisy logging
litellm.suppress_debug_info = True


class LLMMessage(TypedDict):
    """Single chat message for the LLM API."""

    role: str
    content: str


class CompletionClient(Protocol):
    """Anything that turns a prompt into generated text."""

    def complete(self, prompt: str) -> str: ...


def build_messages(prompt: str) -> list[LLMMessage]:
    """Wrap the assembled prompt as a single user turn."""
    return [{"role": "user", "content": prompt}]


class LiteLLMClient:
    """Completion client backed by litellm."""

    def __init__(self, config: WizardConfig) -> None:
        self.model = config.model
        self.api_key = config.api_key

    def complete(self, prompt: str) -> str:
        log.debug("model=%s prompt=%d chars", self.model, len(prompt))
        try:
            response = litellm.completion(
                model=self.model,
                messages=build_messages(prompt),
                api_key=self.api_key,
            )
        except Exception as e:
            raise ServiceError(f"Error generating content: {e}") from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content or ""
        log.debug("raw response: %s", content)
        return content
