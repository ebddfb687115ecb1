from __future__ import annotations

from dataclasses import replace as clone
from typing import Dict, List, Optional

from bson import ObjectId

from ..models import NewsEntry
from .base import NewsStore


class MemoryNewsStore(NewsStore):
    """Keeps entries in a dict for offline development and tests."""

    def __init__(self, entries: Optional[List[NewsEntry]] = None) -> None:
        self._entries: Dict[str, NewsEntry] = {}
        for entry in entries or []:
            self.insert(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def find_all(self) -> List[NewsEntry]:
        return [clone(entry) for entry in self._entries.values()]

    def find_by_id(self, entry_id: str) -> Optional[NewsEntry]:
        entry = self._entries.get(entry_id)
        return clone(entry) if entry else None

    def find_one_by_url(self, url: Optional[str]) -> Optional[NewsEntry]:
        for entry in self._entries.values():
            if entry.url == url:
                return clone(entry)
        return None

    def insert(self, entry: NewsEntry) -> NewsEntry:
        entry.id = str(ObjectId())
        self._entries[entry.id] = clone(entry)
        return entry

    def replace(self, entry_id: str, entry: NewsEntry) -> Optional[NewsEntry]:
        if entry_id not in self._entries:
            return None
        self._entries[entry_id] = clone(entry, id=entry_id)
        return clone(self._entries[entry_id])

    def delete(self, entry_id: str) -> None:
        self._entries.pop(entry_id, None)

    def ping(self) -> None:
        return None
