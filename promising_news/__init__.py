"""Promising News package initializer."""

from .config import AppConfig
from .ingest import HeadlineIngestor
from .service import NewsService

__all__ = ["AppConfig", "HeadlineIngestor", "NewsService"]
