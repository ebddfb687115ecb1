from .base import BaseProvider
from .mock_provider import StaticProvider
from .newsapi_provider import NewsAPIProvider

__all__ = ["BaseProvider", "NewsAPIProvider", "StaticProvider"]
