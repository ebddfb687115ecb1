from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import NewsEntry


class NewsStore(ABC):
    """Abstract base class for news entry collections.

    Implementations raise ``StoreError`` for any driver-level failure.
    """

    @abstractmethod
    def find_all(self) -> List[NewsEntry]:
        """Return every stored entry, unfiltered."""

    @abstractmethod
    def find_by_id(self, entry_id: str) -> Optional[NewsEntry]:
        """Return the entry with ``entry_id`` or ``None``."""

    @abstractmethod
    def find_one_by_url(self, url: Optional[str]) -> Optional[NewsEntry]:
        """Return the first entry whose ``url`` equals ``url`` or ``None``."""

    @abstractmethod
    def insert(self, entry: NewsEntry) -> NewsEntry:
        """Store ``entry`` and return it with its assigned identifier."""

    @abstractmethod
    def replace(self, entry_id: str, entry: NewsEntry) -> Optional[NewsEntry]:
        """Overwrite all fields of ``entry_id``; ``None`` when it does not exist."""

    @abstractmethod
    def delete(self, entry_id: str) -> None:
        """Remove ``entry_id`` if present."""

    @abstractmethod
    def ping(self) -> None:
        """Raise ``StoreError`` if the store is unreachable."""
