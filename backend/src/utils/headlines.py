import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from schemes.news import ArticleOut
from settings import settings
from utils.enums import Category, remote_category

logger = logging.getLogger(__name__)

REMOVED_TITLE = "[Removed]"
NO_DESCRIPTION = "No description available"
UNKNOWN_SOURCE = "Unknown source"


@dataclass(frozen=True)
class LiveSuccess:
    articles: Tuple[ArticleOut, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LiveFailure:
    reason: str


LiveResult = Union[LiveSuccess, LiveFailure]


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def normalize_article(raw: Dict[str, Any], category: str, position: int) -> Optional[ArticleOut]:
    """
    Maps one top-headlines entry to ArticleOut.
    Returns None for entries without a usable title.
    """
    if not isinstance(raw, dict):
        return None
    title = _text(raw.get("title"))
    if title is None or title == REMOVED_TITLE:
        return None

    source = raw.get("source")
    source_name = _text(source.get("name")) if isinstance(source, dict) else None

    return ArticleOut(
        id=f"{category}-{position}-{uuid.uuid4().hex[:8]}",
        title=title,
        description=_text(raw.get("description")) or NO_DESCRIPTION,
        source=source_name or UNKNOWN_SOURCE,
        published_at=_text(raw.get("publishedAt")) or datetime.now(timezone.utc).isoformat(),
        url=_text(raw.get("url")),
        image_url=_text(raw.get("urlToImage")),
        category=Category.coerce(category),
    )


def normalize_articles(raw_articles: List[Any], category: str) -> List[ArticleOut]:
    out: List[ArticleOut] = []
    for raw in raw_articles:
        if (article := normalize_article(raw, category, len(out) + 1)) is not None:
            out.append(article)
    return out


class HeadlinesClient:
    """Best-effort reader of the top-headlines endpoint. Never raises on remote trouble."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: Optional[str],
        *,
        base_url: str,
        timeout: float,
        page_size: int,
        language: str,
    ):
        self._http = http
        self._key = api_key
        self._url = base_url.rstrip("/") + "/top-headlines"
        self._timeout = timeout
        self._page_size = page_size
        self._language = language

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient) -> "HeadlinesClient":
        return cls(
            http,
            settings.news_api.key,
            base_url=settings.news_api.base_url,
            timeout=settings.news_api.timeout_sec,
            page_size=settings.news_api.page_size,
            language=settings.news_api.language,
        )

    async def _get_json(self, params: Dict[str, Any]) -> Any:
        resp = await self._http.get(self._url, params=params)
        resp.raise_for_status()
        return resp.json()

    async def fetch_live(self, category: str) -> LiveResult:
        if not self._key:
            return LiveFailure("missing api key")

        params = {
            "category": remote_category(category).value,
            "pageSize": self._page_size,
            "language": self._language,
            "apiKey": self._key,
        }
        # deadline covers connect, headers and the whole body read
        try:
            data = await asyncio.wait_for(self._get_json(params), self._timeout)
        except (TimeoutError, httpx.TimeoutException):
            return self._failed(category, "timeout")
        except httpx.HTTPStatusError as e:
            return self._failed(category, f"status {e.response.status_code}")
        except httpx.HTTPError as e:
            return self._failed(category, f"transport error: {e!r}")
        except ValueError:
            return self._failed(category, "malformed json")

        if not isinstance(data, dict):
            return self._failed(category, "unexpected payload")
        if data.get("status", "ok") != "ok":
            return self._failed(category, f"api error: {data.get('code') or data.get('message')}")
        raw_articles = data.get("articles")
        if not isinstance(raw_articles, list) or not raw_articles:
            return self._failed(category, "empty payload")

        articles = normalize_articles(raw_articles, category)
        logger.info("Headlines API returned %s articles for %s", len(articles), category)
        return LiveSuccess(tuple(articles))

    @staticmethod
    def _failed(category: str, reason: str) -> LiveFailure:
        logger.warning("Headlines API failed for %s: %s", category, reason)
        return LiveFailure(reason)


__all__ = ["HeadlinesClient", "LiveResult", "LiveSuccess", "LiveFailure", "normalize_article", "normalize_articles"]
