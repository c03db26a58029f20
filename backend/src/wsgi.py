import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from routes.health import router as health_router
from routes.news import router as news_router
from routes.summary import router as summary_router
from settings import settings
from utils.enums import Category
from utils.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.app.log_level)
    app.state.http = httpx.AsyncClient(
        timeout=settings.news_api.timeout_sec,
        headers={"User-Agent": "headlines-backend/1.0"},
    )
    logger.info("Categories: %s", ", ".join(Category))
    if not settings.news_api.configured:
        logger.warning("NEWS_API_KEY is not set, every request will be served from fallback content")
    try:
        yield
    finally:
        await app.state.http.aclose()


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Headlines API",
        version="1.0.0",
        routes=app.routes,
        description="Top headlines with fallback content and mock summaries",
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(
    title="Headlines API",
    lifespan=lifespan,
    **(
        {
            "docs_url": "/docs",
            "redoc_url": "/redoc",
            "openapi_url": "/openapi.json"
        }
        if settings.app.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    )
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.openapi = custom_openapi
app.include_router(news_router, prefix=settings.app.api_prefix)
app.include_router(summary_router, prefix=settings.app.api_prefix)
app.include_router(health_router, prefix=settings.app.api_prefix)


def run() -> None:
    uvicorn.run(app, host=settings.app.host, port=settings.app.port)


if __name__ == "__main__":
    run()
