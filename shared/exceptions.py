"""Shared exception types."""

from __future__ import annotations


class AppError(Exception):
    """Base exception for application-level errors."""


class NotFoundError(AppError):
    """Raised when a requested resource cannot be located."""


class ClubDataUnavailableError(NotFoundError):
    """No candidate path for the clubs dataset could be read."""

    def __init__(self, attempted: list[str], last_error: OSError | None = None):
        self.attempted = list(attempted)
        self.last_error = last_error
        message = "clubs JSON not found; tried: " + ", ".join(self.attempted)
        if last_error is not None:
            message += f"; last error: {last_error}"
        super().__init__(message)


class ClubDataMalformedError(AppError):
    """The clubs dataset was read but is not a JSON array of club objects."""

    def __init__(self, message: str, *, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(f"{message} ({path})" if path else message)


class FootballDataError(AppError):
    """Raised when football-data.org requests fail."""
