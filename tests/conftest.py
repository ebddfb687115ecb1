import pytest

from app import create_app
from promising_news.config import AppConfig
from promising_news.models import NewsEntry, RawHeadline
from promising_news.providers import StaticProvider
from promising_news.service import NewsService
from promising_news.store import MemoryNewsStore


@pytest.fixture
def entries():
    return [
        NewsEntry(
            title="Local library opens new wing",
            url="https://example.com/library",
            author="Dana Reyes",
            description="A community celebration downtown.",
            date="2022-03-15T09:00:00.000Z",
            publication="City Herald",
            positivity_score=0.7,
        ),
        NewsEntry(
            title="Volunteers restore river park",
            url="https://example.com/river",
            author=None,
            description=None,
            date="2022-06-01T12:30:00.000Z",
            publication="Green Times",
            positivity_score=0.9,
        ),
        NewsEntry(
            title="Bakery wins regional award",
            url="https://example.com/bakery",
            author="Sam Lee",
            description="Sourdough takes first prize.",
            date="2023-01-20T08:00:00.000Z",
            publication=None,
            positivity_score=0.55,
        ),
    ]


@pytest.fixture
def store(entries):
    return MemoryNewsStore(entries)


@pytest.fixture
def service(store):
    return NewsService(store)


@pytest.fixture
def headlines():
    return [
        RawHeadline(
            title="Rescue team saves stranded hikers",
            url="https://example.com/hikers",
            author="A. Writer",
            description="All hikers are safe.",
            published_at="2024-05-02T10:00:00Z",
            image_url="https://example.com/hikers.jpg",
            source="Mountain News",
        ),
        RawHeadline(
            title="Storm causes disaster on the coast",
            url="https://example.com/storm",
            published_at="2024-05-02T11:00:00Z",
            source="Coast Daily",
        ),
    ]


@pytest.fixture
def config():
    return AppConfig(newsapi_key=None)


@pytest.fixture
def client(config, store, headlines):
    app = create_app(config, store=store, provider=StaticProvider(headlines))
    app.testing = True
    return app.test_client()
