from __future__ import annotations

import logging
from typing import List

import requests

from ..errors import HeadlineFetchError
from ..models import RawHeadline
from .base import BaseProvider

logger = logging.getLogger(__name__)


class NewsAPIProvider(BaseProvider):
    """Fetches top headlines from newsapi.org."""

    BASE_URL = "https://newsapi.org/v2/top-headlines"

    def __init__(self, api_key: str, country: str = "us", language: str = "en", page_size: int = 100) -> None:
        if not api_key:
            raise ValueError("NewsAPIProvider requires an API key")
        self._api_key = api_key
        self.country = country
        self.language = language
        self.page_size = page_size

    def fetch_top_headlines(self) -> List[RawHeadline]:
        params = {
            "country": self.country,
            "language": self.language,
            "pageSize": self.page_size,
        }
        try:
            response = requests.get(
                self.BASE_URL,
                params=params,
                headers={"X-Api-Key": self._api_key},
                timeout=10,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise HeadlineFetchError(f"Failed to fetch top headlines: {exc}") from exc
        except ValueError as exc:
            raise HeadlineFetchError(f"Invalid response from NewsAPI: {exc}") from exc
        if payload.get("status") == "error":
            raise HeadlineFetchError(payload.get("message") or "NewsAPI returned an error")
        articles = payload.get("articles") or []
        logger.info("Fetched %d top headlines (%s/%s)", len(articles), self.country, self.language)
        return [_to_headline(article) for article in articles]


def _to_headline(article: dict) -> RawHeadline:
    return RawHeadline(
        title=article.get("title") or "",
        url=article.get("url") or "",
        author=article.get("author"),
        description=article.get("description"),
        published_at=article.get("publishedAt"),
        image_url=article.get("urlToImage"),
        source=(article.get("source") or {}).get("name"),
    )
