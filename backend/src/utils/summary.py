import asyncio
import logging
from typing import Any, Mapping, Optional

from schemes.summary import SummaryOut

logger = logging.getLogger(__name__)

MODEL = "enhanced-mock-v3"
DEGRADED_MODEL = "fallback-mock"

SUMMARY_TEMPLATE = """\
**Article Summary**

**Title:** {title}

**Key Insights:**
• {description}
• Represents significant development in the {category}
• Potential for broader implications and trends
• Could influence future developments

**Overall Analysis:**
This article highlights important developments that demonstrate ongoing innovation and changes in the field, with potential ripple effects across the industry."""

DEGRADED_TEMPLATE = """\
**Article Summary**

**Title:** {title}

**Main Points:**
• {description}
• Significant development in the industry
• Potential for broader implications

**Summary:**
This news highlights important developments that could influence future trends and industry practices."""


def _field(article: Any, name: str) -> Optional[str]:
    if not isinstance(article, Mapping):
        return None
    value = article.get(name)
    if isinstance(value, str) and value.strip():
        return value
    return None


def degraded_summary(article: Any) -> SummaryOut:
    return SummaryOut(
        summary=DEGRADED_TEMPLATE.format(
            title=_field(article, "title") or "Untitled article",
            description=_field(article, "description") or "No description available",
        ),
        model=DEGRADED_MODEL,
        processing_time="1.0s",
    )


async def summarize(article: Any, delay: float = 2.0) -> SummaryOut:
    title, description = _field(article, "title"), _field(article, "description")
    if title is None or description is None:
        logger.info("Malformed article for summary, using degraded template")
        return degraded_summary(article)

    logger.info("Summarizing: %s", title)
    await asyncio.sleep(delay)
    return SummaryOut(
        summary=SUMMARY_TEMPLATE.format(
            title=title,
            description=description,
            category=_field(article, "category") or "industry",
        ),
        model=MODEL,
        processing_time=f"{delay:.1f}s",
    )
