from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .errors import NewsServiceError
from .models import RawHeadline
from .providers.base import BaseProvider
from .sentiment import positivity_from_score, score_sentiment
from .service import NewsService

logger = logging.getLogger(__name__)

Scorer = Callable[[Optional[str]], float]


@dataclass(slots=True)
class IngestReport:
    success_count: int = 0
    fail_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": "Daily news update complete",
            "successCount": self.success_count,
            "failCount": self.fail_count,
        }


class HeadlineIngestor:
    """Stores the non-negative top headlines from a provider."""

    def __init__(self, service: NewsService, provider: BaseProvider, scorer: Scorer = score_sentiment) -> None:
        self.service = service
        self.provider = provider
        self.scorer = scorer

    def run(self) -> IngestReport:
        headlines = self.provider.fetch_top_headlines()
        report = IngestReport()
        for headline in headlines:
            raw_score = self.scorer(headline.title)
            if raw_score < 0:
                continue
            try:
                self.service.create_entry(to_payload(headline, raw_score))
            except NewsServiceError as exc:
                logger.warning("Skipped headline %r: %s", headline.url, exc.message)
                report.fail_count += 1
            else:
                report.success_count += 1
        logger.info(
            "Headline ingestion finished: %d stored, %d failed",
            report.success_count,
            report.fail_count,
        )
        return report


def to_payload(headline: RawHeadline, raw_score: float) -> Dict[str, Any]:
    """Map a headline onto the entry schema."""
    return {
        "title": headline.title,
        "author": headline.author,
        "description": headline.description,
        "date": headline.published_at,
        "url": headline.url,
        "image_url": headline.image_url,
        "publication": headline.source,
        "positivity_score": positivity_from_score(raw_score),
    }
