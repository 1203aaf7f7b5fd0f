"""Domain records loaded from the clubs dataset.

Usage:
    from models import Club
"""
from __future__ import annotations

from .club import Club

__all__ = ["Club"]
