"""FastAPI application factory."""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from astrocritics.config import get_settings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import COLLABORATOR_STATE_KEYS
from api.middleware.rate_limit import REDIS_STATE_KEY, RateLimitMiddleware
from api.routers import characters, chart, chat, health

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        for key in COLLABORATOR_STATE_KEYS:
            collaborator = getattr(app.state, key, None)
            close = getattr(collaborator, "close", None)
            if close is not None:
                await close()
        redis_client = getattr(app.state, REDIS_STATE_KEY, None)
        if redis_client is not None:
            await redis_client.aclose()


def _warn_missing_credentials() -> None:
    settings = get_settings()
    if not settings.openrouter_api_key.strip():
        logger.warning("OPENROUTER_API_KEY is empty; chat endpoints will return 503")


def create_app() -> FastAPI:
    _configure_logging()
    app = FastAPI(title="Astro Critics API", version="0.1.0", lifespan=lifespan)
    settings = get_settings()
    _warn_missing_credentials()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RateLimitMiddleware)
    app.include_router(health.router, tags=["health"])
    app.include_router(chart.router, prefix="/v1/chart", tags=["chart"])
    app.include_router(characters.router, prefix="/v1/characters", tags=["characters"])
    app.include_router(chat.router, prefix="/v1/chat", tags=["chat"])
    return app


app = create_app()
