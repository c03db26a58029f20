from typing import List

from fastapi import APIRouter, Depends, Query, Request

from schemes.news import ArticleOut
from utils.headlines import HeadlinesClient
from utils.news import assemble

router = APIRouter(prefix="/news", tags=["news"])


def get_headlines(request: Request) -> HeadlinesClient:
    return HeadlinesClient.from_settings(request.app.state.http)


@router.get("", response_model=List[ArticleOut])
async def list_news(
    category: str = Query("All"),
    headlines: HeadlinesClient = Depends(get_headlines),
):
    live = await headlines.fetch_live(category)
    return assemble(category, live)
