from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONNECTION_URL = "mongodb://localhost:27017/promising_news"


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration for the news service."""

    port: int = 4000
    connection_url: str = DEFAULT_CONNECTION_URL
    newsapi_key: Optional[str] = None
    headline_country: str = "us"
    headline_language: str = "en"
    headline_page_size: int = 100

    @classmethod
    def from_env(cls) -> "AppConfig":
        import os

        return cls(
            port=_parse_int("PORT", os.getenv("PORT"), default=4000),
            connection_url=os.getenv("CONNECTION_URL") or DEFAULT_CONNECTION_URL,
            newsapi_key=os.getenv("NEWSAPI_KEY") or None,
            headline_country=os.getenv("NEWS_HEADLINE_COUNTRY", "us"),
            headline_language=os.getenv("NEWS_HEADLINE_LANGUAGE", "en"),
            headline_page_size=_parse_int("NEWS_HEADLINE_PAGE_SIZE", os.getenv("NEWS_HEADLINE_PAGE_SIZE"), default=100),
        )


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None
