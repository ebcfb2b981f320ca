# app/providers/factory.py
from __future__ import annotations
import logging
from typing import Optional

import httpx

from app.core.config import Settings
from app.providers.base import ImageModelClient

logger = logging.getLogger(__name__)


def build_image_client(settings: Settings, http: httpx.AsyncClient) -> Optional[ImageModelClient]:
    """
    Provider selected by AI_PROVIDER. Returns None when its credential is
    missing; callers then serve mock views or answer 500 for room renders.
    """
    api_key = settings.provider_api_key
    if not api_key:
        logger.warning("%s not set, AI provider '%s' disabled", settings.provider_key_name, settings.AI_PROVIDER)
        return None

    if settings.AI_PROVIDER == "gemini":
        from app.providers.gemini import GeminiImageClient
        client = GeminiImageClient(
            api_key,
            vision_model=settings.GEMINI_VISION_MODEL,
            image_model=settings.GEMINI_IMAGE_MODEL,
        )
    else:
        from app.providers.xai import XAIImageClient
        client = XAIImageClient(
            api_key,
            http,
            base_url=settings.XAI_BASE_URL,
            chat_model=settings.XAI_CHAT_MODEL,
            image_model=settings.XAI_IMAGE_MODEL,
            timeout_s=settings.AI_TIMEOUT_S,
        )

    logger.info("AI provider ready name=%s image_model=%s", client.name, client.image_model)
    return client
