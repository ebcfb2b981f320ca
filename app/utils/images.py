# app/utils/images.py
from __future__ import annotations
import base64
import logging
from dataclasses import dataclass

import httpx

from app.domain.errors import ClientInputError, ReferenceImageError
from app.domain.services.constants import ALLOWED_IMAGE_TYPES, DEFAULT_IMAGE_MIME, MAX_UPLOAD_BYTES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME

    @property
    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.b64}"


def _normalize_mime(content_type: str | None) -> str:
    # "image/jpeg; charset=binary" -> "image/jpeg"
    return (content_type or "").split(";")[0].strip().lower()


def _format_limit(max_bytes: int) -> str:
    # whole MB or KB when the limit divides evenly, else bytes
    for unit, size in (("MB", 1024 * 1024), ("KB", 1024)):
        if max_bytes >= size and max_bytes % size == 0:
            return f"{max_bytes // size}{unit}"
    return f"{max_bytes} bytes"


def validate_upload(field_name: str, data: bytes, content_type: str | None, *, max_bytes: int = MAX_UPLOAD_BYTES) -> ImagePayload:
    """
    Check an uploaded image before anything is sent to a vendor.
    Raises ClientInputError with a message meant for the end user.
    """
    if not data:
        raise ClientInputError(f"{field_name} is empty.")
    if len(data) > max_bytes:
        raise ClientInputError(f"{field_name} must be {_format_limit(max_bytes)} or less.")
    mime = _normalize_mime(content_type)
    if mime not in ALLOWED_IMAGE_TYPES:
        raise ClientInputError(f"{field_name} must be PNG, JPG, JPEG, or WEBP.")
    return ImagePayload(data=data, mime_type=mime)


async def fetch_image(http: httpx.AsyncClient, url: str) -> ImagePayload:
    """Download a reference image; content type falls back to image/jpeg."""
    try:
        resp = await http.get(url, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Reference image fetch failed url=%s status=%s", url, e.response.status_code)
        raise ReferenceImageError(
            f"Reference image fetch failed: {e.response.status_code}",
            upstream_status=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        logger.warning("Reference image fetch failed url=%s error=%s", url, e)
        raise ReferenceImageError(f"Reference image fetch failed: {e}") from e

    mime = _normalize_mime(resp.headers.get("content-type")) or DEFAULT_IMAGE_MIME
    logger.debug("Fetched reference image url=%s bytes=%d mime=%s", url, len(resp.content), mime)
    return ImagePayload(data=resp.content, mime_type=mime)
