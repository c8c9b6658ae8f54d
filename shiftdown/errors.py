"""
Settings Errors
===============

Typed failures raised while loading the settings file. A missing file is not
an error; only a file that exists but cannot be read, parsed or bound to the
settings schema ends up as a `ConfigurationError`.
"""

from typing import Optional

MESSAGE_PREFIX = "The settings file is incorrect:"


class BindingError(ValueError):
    """The XML document does not match the settings schema."""


class ConfigurationError(Exception):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ConfigurationError":
        """
        Wrap a load failure into a single readable message.

        The message lists the prefix, the failure itself and the failure it
        was raised from (if any), one per line.
        """
        inner = exc.__cause__
        message = "\n".join(
            [MESSAGE_PREFIX, str(exc), str(inner) if inner is not None else ""]
        ).strip()
        return cls(message, cause=exc)
