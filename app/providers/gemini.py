# app/providers/gemini.py
from __future__ import annotations
import base64
import logging
from time import monotonic as _now
from typing import List, Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.domain.errors import UpstreamError
from app.domain.models.generation import GENERATED_IMAGE_MIME, EditedImage
from app.utils.images import ImagePayload

logger = logging.getLogger(__name__)

OP_DESCRIBE = "Furniture description"
OP_EDIT = "Image generation"


def _upstream_error(op: str, e: genai_errors.APIError) -> UpstreamError:
    logger.error("Gemini %s error code=%s message=%s", op, e.code, e.message)
    return UpstreamError(e.message or f"{op} failed: {e.code}", upstream_status=e.code)


def _transport_error(op: str, e: httpx.RequestError) -> UpstreamError:
    logger.error("Gemini %s connection error: %s", op, e)
    return UpstreamError(f"{op} failed: {e}")


class GeminiImageClient:
    """
    Google Gemini binding (google-genai SDK, async surface).
    - describe: text + inline image, text answer
    - edit: text + inline image with response_modalities=["IMAGE"]
    """
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        *,
        vision_model: str = "gemini-2.5-flash",
        image_model: str = "gemini-2.5-flash-image",
        client: Optional[genai.Client] = None,
    ):
        self.vision_model = vision_model
        self.image_model = image_model
        self._client = client or genai.Client(api_key=api_key)

    @staticmethod
    def _image_part(image: ImagePayload) -> types.Part:
        return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)

    async def describe_image(self, image: ImagePayload, instruction: str) -> Optional[str]:
        t0 = _now()
        try:
            response = await self._client.aio.models.generate_content(
                model=self.vision_model,
                contents=[instruction, self._image_part(image)],
                config=types.GenerateContentConfig(temperature=0.3),
            )
        except genai_errors.APIError as e:
            raise _upstream_error(OP_DESCRIBE, e) from e
        except httpx.RequestError as e:
            raise _transport_error(OP_DESCRIBE, e) from e

        logger.info("Gemini describe model=%s duration=%.3fs", self.vision_model, _now() - t0)
        text = response.text
        return text.strip() if text else None

    async def edit_image(self, image: ImagePayload, prompt: str) -> List[EditedImage]:
        t0 = _now()
        try:
            response = await self._client.aio.models.generate_content(
                model=self.image_model,
                contents=[prompt, self._image_part(image)],
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE"],
                    candidate_count=1,
                ),
            )
        except genai_errors.APIError as e:
            raise _upstream_error(OP_EDIT, e) from e
        except httpx.RequestError as e:
            raise _transport_error(OP_EDIT, e) from e

        # parts may sit on the response or nested in the first candidate
        parts = None
        if getattr(response, "parts", None):
            parts = response.parts
        elif response.candidates:
            content = response.candidates[0].content
            parts = content.parts if content else None

        results: List[EditedImage] = []
        for part in parts or []:
            if part.text:
                logger.debug("Gemini text part: %s", part.text[:200])
                continue
            inline = part.inline_data
            if inline is None or not inline.data:
                continue
            results.append(
                EditedImage(
                    b64_json=base64.b64encode(inline.data).decode("ascii"),
                    mime_type=inline.mime_type or GENERATED_IMAGE_MIME,
                )
            )

        logger.info(
            "Gemini edit model=%s duration=%.3fs results=%d", self.image_model, _now() - t0, len(results)
        )
        return results
