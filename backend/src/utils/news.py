import logging
import random
from typing import Iterable, List

from schemes.news import ArticleOut
from utils.enums import Category
from utils.fallback import FALLBACK_CORPUS, corpus_articles
from utils.headlines import LiveFailure, LiveResult, LiveSuccess

logger = logging.getLogger(__name__)

MIN_LIVE_ARTICLES = 8
MAX_ARTICLES = 20


def fallback_articles(category: str) -> List[ArticleOut]:
    """
    Fallback set for a requested category key.
    All -> shuffled union of every category, capped at MAX_ARTICLES;
    unknown keys -> Technology.
    """
    if category == Category.ALL:
        pool = [a for cat in FALLBACK_CORPUS for a in corpus_articles(cat)]
        random.shuffle(pool)
        return pool[:MAX_ARTICLES]
    if category in FALLBACK_CORPUS:
        return corpus_articles(Category(category))
    return corpus_articles(Category.TECHNOLOGY)


def dedupe_by_title(articles: Iterable[ArticleOut]) -> List[ArticleOut]:
    # exact, case-sensitive match; first occurrence wins
    seen, out = set(), []
    for a in articles:
        if a.title in seen:
            continue
        seen.add(a.title)
        out.append(a)
    return out


def _combine(category: str, live: LiveResult) -> List[ArticleOut]:
    if isinstance(live, LiveSuccess):
        if len(live.articles) >= MIN_LIVE_ARTICLES:
            return list(live.articles)
        fallback = fallback_articles(category)
        logger.info("Mixing %s live with %s fallback articles for %s", len(live.articles), len(fallback), category)
        return [*live.articles, *fallback]
    if isinstance(live, LiveFailure):
        fallback = fallback_articles(category)
        logger.info("Using %s fallback articles for %s (%s)", len(fallback), category, live.reason)
        return fallback
    raise TypeError(f"unexpected live result: {live!r}")


def assemble(category: str, live: LiveResult) -> List[ArticleOut]:
    try:
        return dedupe_by_title(_combine(category, live))[:MAX_ARTICLES]
    except Exception:
        logger.exception("Assembly failed for %s, serving fallback set", category)
        return fallback_articles(category)


__all__ = ["MIN_LIVE_ARTICLES", "MAX_ARTICLES", "assemble", "dedupe_by_title", "fallback_articles"]
