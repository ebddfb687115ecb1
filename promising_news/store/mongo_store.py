"""MongoDB storage for news entries."""

from __future__ import annotations

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..errors import StoreError
from ..models import NewsEntry
from .base import NewsStore

logger = logging.getLogger(__name__)

COLLECTION_NAME = "newsentries"
DEFAULT_DATABASE = "test"


class MongoNewsStore(NewsStore):
    """MongoDB-backed storage for news entries."""

    def __init__(self, collection: Collection, create_indexes: bool = True) -> None:
        self.collection = collection
        if create_indexes:
            self.ensure_indexes()

    @classmethod
    def from_url(cls, connection_url: str, **client_options) -> "MongoNewsStore":
        """Connect using ``connection_url``; the database comes from the URI path.

        No server round-trip happens here: call ``ping`` and then
        ``ensure_indexes`` once the store is known to be reachable.
        """
        client: MongoClient = MongoClient(connection_url, **client_options)
        database = client.get_default_database(default=DEFAULT_DATABASE)
        return cls(database[COLLECTION_NAME], create_indexes=False)

    def ensure_indexes(self) -> None:
        # url stays non-unique, duplicates are rejected by the create pre-check.
        try:
            self.collection.create_index([("url", ASCENDING)])
            self.collection.create_index([("date", ASCENDING)])
        except PyMongoError as exc:
            logger.warning("Failed to create news indexes: %s", exc)

    def find_all(self) -> List[NewsEntry]:
        try:
            return [NewsEntry.from_document(doc) for doc in self.collection.find()]
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    def find_by_id(self, entry_id: str) -> Optional[NewsEntry]:
        try:
            document = self.collection.find_one({"_id": ObjectId(entry_id)})
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return NewsEntry.from_document(document) if document else None

    def find_one_by_url(self, url: Optional[str]) -> Optional[NewsEntry]:
        try:
            document = self.collection.find_one({"url": url})
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return NewsEntry.from_document(document) if document else None

    def insert(self, entry: NewsEntry) -> NewsEntry:
        document = entry.to_document()
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        entry.id = str(result.inserted_id)
        logger.debug("Stored news entry %s: %s", entry.id, (entry.title or "")[:50])
        return entry

    def replace(self, entry_id: str, entry: NewsEntry) -> Optional[NewsEntry]:
        try:
            document = self.collection.find_one_and_replace(
                {"_id": ObjectId(entry_id)},
                entry.to_document(),
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return NewsEntry.from_document(document) if document else None

    def delete(self, entry_id: str) -> None:
        try:
            self.collection.delete_one({"_id": ObjectId(entry_id)})
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    def ping(self) -> None:
        try:
            self.collection.database.client.admin.command("ping")
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
