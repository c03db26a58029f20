import itertools
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from routes.news import get_headlines
from settings import settings
from utils.headlines import HeadlinesClient
from wsgi import app

API = settings.app.api_prefix

_counter = itertools.count(1)

CLIENT_OPTIONS = {"base_url": "https://newsapi.test/v2", "page_size": 15, "language": "en"}


def raw_article(title: Any = None, **overrides) -> Dict[str, Any]:
    n = next(_counter)
    raw = {
        "source": {"id": None, "name": f"Source {n}"},
        "author": "Staff",
        "title": title if title is not None else f"Live headline {n}",
        "description": f"Description {n}",
        "url": f"https://example.com/{n}",
        "urlToImage": f"https://example.com/{n}.jpg",
        "publishedAt": "2025-07-03T23:35:10Z",
        "content": None,
    }
    raw.update(overrides)
    return raw


def headlines_payload(articles: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"status": "ok", "totalResults": len(articles), "articles": articles}


def json_handler(payload: Any, status_code: int = 200, seen: list | None = None) -> Callable:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)
    return handler


@pytest.fixture
async def make_headlines():
    clients = []

    def factory(handler: Callable, api_key: str | None = "test-key", timeout: float = 1.0) -> HeadlinesClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(http)
        return HeadlinesClient(http, api_key, timeout=timeout, **CLIENT_OPTIONS)

    yield factory
    for http in clients:
        await http.aclose()


@pytest.fixture
def upstream() -> Dict[str, Callable]:
    """Mutable holder for the handler the overridden headlines client talks to."""
    return {"handler": json_handler({"status": "error", "code": "apiKeyMissing"}, 401)}


@pytest.fixture
def api_client(upstream):
    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream["handler"])) as http:
            yield HeadlinesClient(http, "test-key", timeout=1.0, **CLIENT_OPTIONS)

    app.dependency_overrides[get_headlines] = override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def no_delay(monkeypatch):
    monkeypatch.setattr(settings.summary, "delay_sec", 0.0)
