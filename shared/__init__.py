"""Shared helpers used across routes and services."""

from .exceptions import (
    AppError,
    ClubDataMalformedError,
    ClubDataUnavailableError,
    FootballDataError,
    NotFoundError,
)

__all__ = [
    "AppError",
    "ClubDataMalformedError",
    "ClubDataUnavailableError",
    "FootballDataError",
    "NotFoundError",
]
