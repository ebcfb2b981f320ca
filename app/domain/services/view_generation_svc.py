# app/domain/services/view_generation_svc.py

from __future__ import annotations
import asyncio
import logging
import random
from time import monotonic as _now
from typing import Dict, List, Optional, Sequence

import httpx

from app.domain.errors import AppError, UpstreamError
from app.domain.models.generation import (
    AIGenerationOptions,
    AIGenerationResponse,
    EditedImage,
    GenerationMetadata,
)
from app.domain.models.product import Product
from app.domain.services.constants import DEFAULT_VIEWS, MOCK_DELAY_MS, MOCK_MODEL
from app.domain.services.prompts import build_prompt
from app.providers.base import ImageModelClient
from app.utils.images import fetch_image

logger = logging.getLogger(__name__)

ViewResults = Dict[str, AIGenerationResponse]


def first_image(results: List[EditedImage]) -> EditedImage:
    """
    First edit result, which must carry inline data or a URL.
    Raises UpstreamError otherwise (a 2xx without a usable payload).
    """
    if not results:
        raise UpstreamError("No image was generated.")
    first = results[0]
    if not first.b64_json and not first.url:
        raise UpstreamError("No image data or URL in response.")
    return first


class ViewGenerationService:
    """
    Re-renders a catalog product from a requested viewpoint.

    - client=None means no credential is configured: every call returns a
      mock success echoing the product's base image.
    - generate_view never raises; render_view does, so HTTP handlers can map
      error types to status codes.
    """

    def __init__(self, client: Optional[ImageModelClient], http: httpx.AsyncClient):
        self.client = client
        self.http = http

    @property
    def is_available(self) -> bool:
        return self.client is not None

    def _mock_response(self, product: Product, prompt: str, t0: float) -> AIGenerationResponse:
        # simulated latency only; nothing sleeps
        delay_ms = random.uniform(*MOCK_DELAY_MS)
        return AIGenerationResponse(
            success=True,
            image_url=product.base_image,
            metadata=GenerationMetadata(
                model=MOCK_MODEL,
                generation_time=(_now() - t0) * 1000.0 + delay_ms,
                prompt_used=prompt,
            ),
        )

    async def render_view(
        self,
        product: Product,
        view_type: str,
        options: Optional[AIGenerationOptions] = None,
    ) -> AIGenerationResponse:
        t0 = _now()
        prompt = build_prompt(product, view_type, options)

        if self.client is None:
            logger.debug("No AI provider configured, mock view product_id=%s view=%s", product.id, view_type)
            return self._mock_response(product, prompt, t0)

        reference = await fetch_image(self.http, product.base_image)
        results = await self.client.edit_image(reference, prompt)
        image = first_image(results)

        elapsed_ms = (_now() - t0) * 1000.0
        logger.info(
            "View generated product_id=%s view=%s model=%s time_ms=%.1f",
            product.id, view_type, self.client.image_model, elapsed_ms,
        )
        return AIGenerationResponse(
            success=True,
            image_url=image.data_url,
            metadata=GenerationMetadata(
                model=self.client.image_model,
                generation_time=elapsed_ms,
                prompt_used=prompt,
            ),
        )

    async def generate_view(
        self,
        product: Product,
        view_type: str,
        options: Optional[AIGenerationOptions] = None,
    ) -> AIGenerationResponse:
        """Envelope variant: failures come back as success=False."""
        try:
            return await self.render_view(product, view_type, options)
        except AppError as e:
            logger.warning("View generation failed product_id=%s view=%s: %s", product.id, view_type, e.message)
            return AIGenerationResponse(success=False, error=e.message)
        except Exception as e:
            logger.exception("AI generation error product_id=%s view=%s", product.id, view_type)
            return AIGenerationResponse(success=False, error=str(e) or "Unknown error occurred")

    async def generate_all_views(
        self,
        product: Product,
        view_types: Sequence[str] = DEFAULT_VIEWS,
        options: Optional[AIGenerationOptions] = None,
    ) -> ViewResults:
        """All views of one product concurrently; keyed by view type, so completion order is irrelevant."""
        unique = list(dict.fromkeys(view_types))
        responses = await asyncio.gather(
            *(self.generate_view(product, vt, options) for vt in unique)
        )
        return dict(zip(unique, responses))

    async def batch_generate_views(
        self,
        products: Sequence[Product],
        view_types: Sequence[str] = DEFAULT_VIEWS,
        options: Optional[AIGenerationOptions] = None,
    ) -> Dict[str, ViewResults]:
        """
        One product at a time: each product's fan-out completes before the
        next starts, to stay under the vendor rate limit.
        """
        results: Dict[str, ViewResults] = {}
        for product in products:
            results[product.id] = await self.generate_all_views(product, view_types, options)
        logger.info("[batch_views] done products=%d views=%d", len(products), len(view_types))
        return results
