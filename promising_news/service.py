from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from bson import ObjectId

from .errors import ConflictError, InvalidIdentifierError, NotFoundError, ReadFailureError, StoreError
from .models import NewsEntry
from .query import NewsQuery, run_query
from .store.base import NewsStore

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Post deleted successfully."


class NewsService:
    """CRUD and listing operations over a ``NewsStore``.

    ``create_entry`` is the only write path for new entries; both the HTTP
    handler and the headline ingestor go through it.
    """

    def __init__(self, store: NewsStore) -> None:
        self.store = store

    def list_entries(self, query: NewsQuery) -> List[NewsEntry]:
        try:
            entries = self.store.find_all()
        except StoreError as exc:
            raise ReadFailureError(exc.message) from exc
        return run_query(entries, query)

    def get_entry(self, entry_id: str) -> NewsEntry:
        if not ObjectId.is_valid(entry_id):
            raise NotFoundError(f"No news entry with id: {entry_id}")
        try:
            entry = self.store.find_by_id(entry_id)
        except StoreError as exc:
            raise NotFoundError(exc.message) from exc
        if entry is None:
            raise NotFoundError(f"No news entry with id: {entry_id}")
        return entry

    def create_entry(self, payload: Mapping[str, Any]) -> NewsEntry:
        entry = NewsEntry.from_payload(payload)
        # Check and insert are separate store calls; concurrent creates can race.
        if self.store.find_one_by_url(entry.url) is not None:
            raise ConflictError("This news entry already exists")
        created = self.store.insert(entry)
        logger.debug("Created news entry %s", created.id)
        return created

    def update_entry(self, entry_id: str, payload: Mapping[str, Any]) -> NewsEntry:
        if not ObjectId.is_valid(entry_id):
            raise InvalidIdentifierError(entry_id)
        entry = NewsEntry.from_payload(payload, entry_id=entry_id)
        updated = self.store.replace(entry_id, entry)
        if updated is None:
            raise NotFoundError(f"No news entry with id: {entry_id}")
        return updated

    def delete_entry(self, entry_id: str) -> Dict[str, str]:
        if not ObjectId.is_valid(entry_id):
            raise InvalidIdentifierError(entry_id)
        self.store.delete(entry_id)
        return {"message": DELETED_MESSAGE}
