# app/providers/xai.py
from __future__ import annotations
import logging
from time import monotonic as _now
from typing import List, Optional

import httpx
from openai import AsyncOpenAI, APIConnectionError, APIStatusError

from app.domain.errors import UpstreamError
from app.domain.models.generation import EditedImage
from app.providers.base import extract_error_message
from app.utils.images import ImagePayload

logger = logging.getLogger(__name__)

OP_DESCRIBE = "Furniture description"
OP_EDIT = "Image generation"


class XAIImageClient:
    """
    xAI / Grok binding.
    - describe: OpenAI-compatible chat completions (vision input)
    - edit: POST {base}/images/edits with a JSON body (image as data URL)
    """
    name = "xai"

    def __init__(
        self,
        api_key: str,
        http: httpx.AsyncClient,
        *,
        base_url: str = "https://api.x.ai/v1",
        chat_model: str = "grok-4",
        image_model: str = "grok-imagine-image",
        timeout_s: float = 120.0,
        chat: Optional[AsyncOpenAI] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.chat_model = chat_model
        self.image_model = image_model
        self._api_key = api_key
        self._http = http
        self._timeout_s = timeout_s
        # no SDK retries: every upstream failure is terminal for its request
        self._chat = chat or AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=timeout_s,
            max_retries=0,
            http_client=http,
        )

    async def describe_image(self, image: ImagePayload, instruction: str) -> Optional[str]:
        t0 = _now()
        try:
            resp = await self._chat.chat.completions.create(
                model=self.chat_model,
                stream=False,
                temperature=0.3,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {"type": "image_url", "image_url": {"url": image.data_url}},
                        ],
                    }
                ],
            )
        except APIStatusError as e:
            body = e.response.text
            logger.error("xAI chat error status=%s body=%s", e.status_code, body[:500])
            raise UpstreamError(
                extract_error_message(body, f"{OP_DESCRIBE} failed: {e.status_code}"),
                upstream_status=e.status_code,
            ) from e
        except APIConnectionError as e:
            logger.error("xAI chat connection error: %s", e)
            raise UpstreamError(f"{OP_DESCRIBE} failed: {e}") from e

        logger.info("xAI describe model=%s duration=%.3fs", self.chat_model, _now() - t0)
        if not resp.choices:
            return None
        content = resp.choices[0].message.content
        return content.strip() if content else None

    async def edit_image(self, image: ImagePayload, prompt: str) -> List[EditedImage]:
        t0 = _now()
        try:
            resp = await self._http.post(
                f"{self.base_url}/images/edits",
                headers={"Authorization": f"Bearer {self._api_key}"},
                json={
                    "model": self.image_model,
                    "image": {"url": image.data_url},
                    "prompt": prompt,
                    "n": 1,
                },
                timeout=self._timeout_s,
            )
        except httpx.RequestError as e:
            logger.error("xAI image edit connection error: %s", e)
            raise UpstreamError(f"{OP_EDIT} failed: {e}") from e

        if not resp.is_success:
            logger.error("xAI image edit error status=%s body=%s", resp.status_code, resp.text[:500])
            raise UpstreamError(
                extract_error_message(resp.text, f"{OP_EDIT} failed: {resp.status_code}"),
                upstream_status=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamError(f"{OP_EDIT} failed: invalid JSON response") from e

        items = (payload.get("data") if isinstance(payload, dict) else None) or []
        logger.info(
            "xAI edit model=%s duration=%.3fs results=%d", self.image_model, _now() - t0, len(items)
        )
        return [
            EditedImage(b64_json=item.get("b64_json"), url=item.get("url"))
            for item in items
            if isinstance(item, dict)
        ]
