"""Club record as stored in ``clubs.json``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shared.exceptions import ClubDataMalformedError

# JSON key -> attribute name; order matches the dataset files.
_JSON_FIELDS = (
    ("id", "id"),
    ("name", "name"),
    ("shortName", "short_name"),
    ("tla", "tla"),
    ("website", "website"),
    ("founded", "founded"),
    ("venue", "venue"),
    ("crestUrl", "crest_url"),
)
_INT_FIELDS = {"id", "founded"}
# Omitted from payloads when empty / zero.
_OPTIONAL_KEYS = {"tla", "website", "founded", "venue", "crestUrl"}


@dataclass(frozen=True, slots=True)
class Club:
    """A football club. Immutable once loaded."""
    id: int
    name: str
    short_name: str = ""
    tla: str = ""
    website: str = ""
    founded: int = 0  # 0 = unknown
    venue: str = ""
    crest_url: str = ""

    @property
    def key(self) -> str:
        """Decimal string form of the id, as stored in the favorites cookie."""
        return str(self.id)

    @classmethod
    def from_dict(cls, raw: Any) -> "Club":
        if not isinstance(raw, dict):
            raise ClubDataMalformedError(f"club record must be an object, got {type(raw).__name__}")
        values: dict[str, Any] = {}
        for json_key, attr in _JSON_FIELDS:
            value = raw.get(json_key)
            if value is None:
                continue
            if json_key in _INT_FIELDS:
                # bool is an int subclass; JSON true/false is not a number
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ClubDataMalformedError(f"club field {json_key!r} must be an integer, got {value!r}")
            elif not isinstance(value, str):
                raise ClubDataMalformedError(f"club field {json_key!r} must be a string, got {value!r}")
            values[attr] = value
        values.setdefault("id", 0)
        values.setdefault("name", "")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for json_key, attr in _JSON_FIELDS:
            value = getattr(self, attr)
            if json_key in _OPTIONAL_KEYS and not value:
                continue
            payload[json_key] = value
        return payload
