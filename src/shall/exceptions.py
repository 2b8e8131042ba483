"""Custom exceptions for Shall.

All exceptions inherit from ShallError with context fields
for better error reporting.
"""

from typing import Any


class ShallError(Exception):
    """Base exception for all Shall errors.

    Includes context dict for structured error information.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class SelectionError(ShallError):
    """Raised when the requested algorithms are invalid for the mode."""

    pass


class InputReadError(ShallError):
    """Raised when an input payload, directory or file cannot be read."""

    @property
    def kind(self) -> str:
        return self.context.get("kind", "other")


class ConfigurationError(ShallError):
    """Raised when the invocation does not describe a usable input."""

    pass
