from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .errors import ValidationError

ENTRY_FIELDS = (
    "title",
    "author",
    "description",
    "date",
    "url",
    "image_url",
    "publication",
    "positivity_score",
)


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class NewsEntry:
    """A stored news record."""

    title: str
    url: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None
    publication: Optional[str] = None
    positivity_score: Optional[float] = None
    id: Optional[str] = None

    @property
    def day(self) -> str:
        if not self.date:
            return ""
        return self.date.split("T")[0]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], entry_id: Optional[str] = None) -> "NewsEntry":
        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("`title` is required")
        return cls(
            id=entry_id,
            title=title,
            url=_optional_text(payload, "url"),
            author=_optional_text(payload, "author"),
            description=_optional_text(payload, "description"),
            date=_optional_text(payload, "date") or utc_timestamp(),
            image_url=_optional_text(payload, "image_url"),
            publication=_optional_text(payload, "publication"),
            positivity_score=_parse_score(payload.get("positivity_score")),
        )

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "NewsEntry":
        raw_id = document.get("_id")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            title=document.get("title"),
            url=document.get("url"),
            author=document.get("author"),
            description=document.get("description"),
            date=document.get("date"),
            image_url=document.get("image_url"),
            publication=document.get("publication"),
            positivity_score=document.get("positivity_score"),
        )

    def to_document(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in ENTRY_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"_id": self.id}
        data.update(self.to_document())
        return data


@dataclass(slots=True)
class RawHeadline:
    """Headline as delivered by an external news source."""

    title: str
    url: str
    author: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[str] = None
    image_url: Optional[str] = None
    source: Optional[str] = None


def _optional_text(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"`{key}` must be a string")
    return value


def _parse_score(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError("`positivity_score` must be a number")
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise ValidationError("`positivity_score` must be a number") from None
    if not math.isfinite(score):
        raise ValidationError("`positivity_score` must be a finite number")
    return score
