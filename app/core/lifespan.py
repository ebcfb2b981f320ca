# app/core/lifespan.py
from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.providers.factory import build_image_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # One outbound client for reference-image downloads and vendor calls
    app.state.http = httpx.AsyncClient(timeout=settings.AI_TIMEOUT_S)

    # Provider is optional: without a key, views are mocked and room renders answer 500
    app.state.image_client = build_image_client(settings, app.state.http)
    if app.state.image_client is None:
        logger.warning("⚠️ No AI credential provided, serving mock views")
    else:
        logger.info("✅ AI provider '%s' configured", app.state.image_client.name)

    # Application runs
    yield

    # --- Shutdown ---
    await app.state.http.aclose()
    logger.info("🔌 HTTP client closed")
