from .base import NewsStore
from .memory_store import MemoryNewsStore
from .mongo_store import MongoNewsStore

__all__ = ["NewsStore", "MemoryNewsStore", "MongoNewsStore"]
