"""Lenient integer parsing for query-string values."""

from __future__ import annotations

import re
from typing import Any, Optional

# Optional sign followed by ASCII digits; no whitespace, underscores or decimals.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when it is not a plain integer string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        return None
    return int(value)
