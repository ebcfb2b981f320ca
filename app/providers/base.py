# app/providers/base.py
"""
Capability interface shared by every image vendor.

A provider can (1) describe an image in free text and (2) edit an image
according to a text instruction. Implementations are interchangeable and
picked by configuration (see factory.py).
"""
from __future__ import annotations
import json
from typing import List, Optional, Protocol, runtime_checkable

from app.domain.models.generation import EditedImage
from app.utils.images import ImagePayload


@runtime_checkable
class ImageModelClient(Protocol):
    name: str
    image_model: str

    async def describe_image(self, image: ImagePayload, instruction: str) -> Optional[str]:
        """Free-text description of `image`, or None when the model returned nothing."""
        ...

    async def edit_image(self, image: ImagePayload, prompt: str) -> List[EditedImage]:
        """Results of one edit request, in vendor order (may be empty)."""
        ...


def extract_error_message(body: str, default: str) -> str:
    """
    Best-effort `error.message` from a vendor error body.
    Falls back to `default` when the body is not JSON or has no message.
    """
    try:
        payload = json.loads(body)
    except (TypeError, ValueError):
        return default
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return default
