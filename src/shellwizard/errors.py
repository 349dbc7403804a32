"""Exceptions raised by shellwizard."""


class WizardError(Exception):
    """Base class for all shellwizard errors."""


class ConfigError(WizardError):
    """Required configuration (such as the API key) is missing."""


class ServiceError(WizardError):
    """The completion service failed to produce a response."""


class CacheWriteError(WizardError):
    """The environment cache could not be written."""


class ExecutionError(WizardError):
    """A confirmed command exited non-zero or could not be launched."""

    def __init__(
        self, command: str, returncode: int | None = None, cause: OSError | None = None
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.cause = cause
        if cause is not None:
            detail = f"could not launch: {cause}"
        else:
            detail = f"exit status {returncode}"
        super().__init__(detail)
