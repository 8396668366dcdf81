"""Exception hierarchy for todogist."""

from __future__ import annotations


class TodoGistError(Exception):
    """Base exception for all todogist errors."""


class ConfigError(TodoGistError):
    """Configuration loading or validation failure."""


class ProviderError(TodoGistError):
    """Todoist API operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class PublishError(TodoGistError):
    """Gist publishing failure."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
