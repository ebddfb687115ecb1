from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import RawHeadline


class BaseProvider(ABC):
    """Abstract base class for headline sources."""

    @abstractmethod
    def fetch_top_headlines(self) -> List[RawHeadline]:
        """Return the current top headlines.

        Raises ``HeadlineFetchError`` when the source cannot be read.
        """
