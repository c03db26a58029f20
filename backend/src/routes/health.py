from datetime import datetime, timezone

from fastapi import APIRouter

from schemes.health import HealthOut
from settings import settings
from utils.enums import Category

router = APIRouter(tags=["health"])

FEATURES = ["Mixed Content", "Duplicate Prevention", "Enhanced Fallbacks"]


@router.get("/health", response_model=HealthOut)
async def health():
    return HealthOut(
        timestamp=datetime.now(timezone.utc).isoformat(),
        message="News aggregator with mixed API + fallback content",
        categories=list(Category),
        features=FEATURES,
        news_api_configured=settings.news_api.configured,
    )
