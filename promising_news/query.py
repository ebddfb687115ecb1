from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .errors import ValidationError
from .models import NewsEntry

DEFAULT_SORT_BY = "date"
DEFAULT_SORT_ORDER = "asc"
DEFAULT_START_DATE = "2022-01-01"
DEFAULT_MAX_RESULTS = 100

_SEARCH_FIELDS = ("title", "author", "publication", "description")

_SORT_KEYS: Dict[str, Callable[[NewsEntry], Any]] = {
    "date": lambda entry: entry.date or "",
    "title": lambda entry: entry.title or "",
    "publication": lambda entry: entry.publication or "",
    "positivity_score": lambda entry: entry.positivity_score or 0.0,
}


@dataclass(slots=True)
class NewsQuery:
    """Filter, sort and limit parameters for listing entries."""

    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER
    keyword: str = ""
    start_date: str = DEFAULT_START_DATE
    end_date: Optional[str] = None
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self) -> None:
        if self.end_date is None:
            self.end_date = _today()
        self.keyword = self.keyword.lower()

    @classmethod
    def from_args(cls, args: Mapping[str, str], today: Optional[str] = None) -> "NewsQuery":
        """Build a query from HTTP query-string arguments; empty values use defaults."""
        return cls(
            sort_by=args.get("sortBy") or DEFAULT_SORT_BY,
            sort_order=args.get("sortOrder") or DEFAULT_SORT_ORDER,
            keyword=args.get("keyword") or "",
            start_date=args.get("startDate") or DEFAULT_START_DATE,
            end_date=args.get("endDate") or today or _today(),
            max_results=_parse_max_results(args.get("maxResults")),
        )

    @property
    def descending(self) -> bool:
        return self.sort_order != "asc"


def run_query(entries: Iterable[NewsEntry], query: NewsQuery) -> List[NewsEntry]:
    matched = [entry for entry in entries if _in_range(entry, query) and _matches_keyword(entry, query.keyword)]
    sort_key = _SORT_KEYS.get(query.sort_by)
    if sort_key is not None:
        matched.sort(key=sort_key, reverse=query.descending)
    return matched[: query.max_results]


def _in_range(entry: NewsEntry, query: NewsQuery) -> bool:
    day = entry.day
    return query.start_date <= day <= query.end_date


def _matches_keyword(entry: NewsEntry, keyword: str) -> bool:
    for field in _SEARCH_FIELDS:
        value = getattr(entry, field)
        if value is not None and keyword in value.lower():
            return True
    return False


def _parse_max_results(value: Optional[str]) -> int:
    if value is None or value == "":
        return DEFAULT_MAX_RESULTS
    try:
        parsed = int(value)
    except ValueError:
        raise ValidationError("`maxResults` must be a positive integer") from None
    if parsed < 1:
        raise ValidationError("`maxResults` must be a positive integer")
    return parsed


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()
