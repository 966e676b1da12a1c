import json

import pytest
import requests
import structlog
from fastapi.testclient import TestClient

from newsfront.services.news import NewsSearchService


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "reuters", "name": "Reuters"},
    "author": "Jane Doe",
    "title": "Bitcoin climbs past record high",
    "description": "The cryptocurrency rallied overnight.",
    "url": "https://www.reuters.com/markets/bitcoin-record",
    "urlToImage": "https://www.reuters.com/images/bitcoin.jpg",
    "publishedAt": "2024-03-04T12:30:00Z",
    "content": "Bitcoin rose 5% on Monday...",
}

NEWS_API_ARTICLE_SPARSE = {
    "source": {"id": None, "name": "Example Blog"},
    "author": None,
    "title": "Why bitcoin matters",
    "description": None,
    "url": "https://blog.example.com/bitcoin",
    "urlToImage": None,
    "publishedAt": "2024-03-03T08:00:00Z",
    "content": None,
}

NEWS_API_SEARCH = {
    "status": "ok",
    "totalResults": 45,
    "articles": [NEWS_API_ARTICLE, NEWS_API_ARTICLE_SPARSE],
}

NEWS_API_EMPTY_PAGE = {
    "status": "ok",
    "totalResults": 45,
    "articles": [],
}

FAKE_API_KEY = "test-key-123"
FAKE_BASE_URL = "https://news.test/v2"


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration an app lifespan applied during a test."""
    yield
    structlog.reset_defaults()


def make_response(status_code: int = 200, payload=None, text: str = "") -> requests.Response:
    """Build a requests.Response carrying the given JSON payload or raw text."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(payload).encode() if payload is not None else text.encode()
    resp.encoding = "utf-8"
    resp.url = FAKE_BASE_URL + "/everything"
    return resp


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def mock_send(mocker, session):
    """Stubbed upstream: Session.send returns a canned search page."""
    return mocker.patch.object(session, "send", return_value=make_response(payload=NEWS_API_SEARCH))


@pytest.fixture
def news_service(session, mock_send):
    return NewsSearchService(FAKE_API_KEY, base_url=FAKE_BASE_URL, timeout=2.5, session=session)


@pytest.fixture
def api_client(news_service):
    """FastAPI TestClient wired to the stubbed search service."""
    from newsfront.main import app
    from newsfront.routers.search import get_search_service

    app.dependency_overrides[get_search_service] = lambda: news_service
    yield TestClient(app)
    app.dependency_overrides.clear()
