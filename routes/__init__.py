"""Aggregate blueprint for Club Tracker routes."""

from __future__ import annotations

from .base import views

# Register route modules (import order not critical but keeps sections grouped)
from . import (
    api,        # noqa: F401
    favorites,  # noqa: F401
    ops,        # noqa: F401
    pages,      # noqa: F401
)

__all__ = ["views"]
