import logging

from fastapi import APIRouter, Request

from schemes.summary import SummaryOut
from settings import settings
from utils.summary import summarize

router = APIRouter(tags=["summary"])
logger = logging.getLogger(__name__)


@router.post("/summarize", response_model=SummaryOut)
async def summarize_article(request: Request):
    """
    Body: {"article": {...}}. Anything that is not a JSON object still
    gets a degraded summary instead of a 4xx.
    """
    try:
        body = await request.json()
    except ValueError:
        logger.info("Summarize called with a non-JSON body")
        body = None
    article = body.get("article") if isinstance(body, dict) else None
    return await summarize(article, delay=settings.summary.delay_sec)
