from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import RawHeadline
from .base import BaseProvider


class StaticProvider(BaseProvider):
    """Returns a fixed list of headlines for offline development."""

    def __init__(self, headlines: Optional[Iterable[RawHeadline]] = None) -> None:
        self._headlines = list(headlines or [])

    def fetch_top_headlines(self) -> List[RawHeadline]:
        return list(self._headlines)
