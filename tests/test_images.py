"""Tests for upload validation, reference-image fetching and provider selection."""
import httpx
import pytest

from app.core.config import Settings
from app.domain.errors import ClientInputError, ReferenceImageError
from app.domain.services.constants import MAX_UPLOAD_BYTES
from app.providers.factory import build_image_client
from app.providers.gemini import GeminiImageClient
from app.providers.xai import XAIImageClient
from app.utils.images import ImagePayload, fetch_image, validate_upload

from conftest import JPEG_BYTES, image_server


class TestValidateUpload:

    @pytest.mark.parametrize("mime", ["image/png", "image/jpeg", "image/jpg", "image/webp", "IMAGE/PNG", "image/png; q=1"])
    def test_allowed_types(self, mime):
        payload = validate_upload("Room image", b"x", mime)
        assert payload.mime_type == mime.split(";")[0].lower()

    @pytest.mark.parametrize("mime", ["image/gif", "application/pdf", "", None])
    def test_rejected_types(self, mime):
        with pytest.raises(ClientInputError, match="must be PNG, JPG, JPEG, or WEBP"):
            validate_upload("Room image", b"x", mime)

    def test_size_boundary(self):
        validate_upload("Room image", b"\x00" * MAX_UPLOAD_BYTES, "image/png")
        with pytest.raises(ClientInputError, match="10MB"):
            validate_upload("Room image", b"\x00" * (MAX_UPLOAD_BYTES + 1), "image/png")

    @pytest.mark.parametrize("limit, text", [(2 * 1024 * 1024, "2MB"), (1536 * 1024, "1536KB"), (1_000_000, "1000000 bytes")])
    def test_size_message_uses_configured_limit(self, limit, text):
        with pytest.raises(ClientInputError) as exc:
            validate_upload("Room image", b"\x00" * (limit + 1), "image/png", max_bytes=limit)
        assert exc.value.message == f"Room image must be {text} or less."

    def test_empty(self):
        with pytest.raises(ClientInputError, match="Room image is empty."):
            validate_upload("Room image", b"", "image/png")


def test_data_url():
    assert ImagePayload(b"ABC", "image/webp").data_url == "data:image/webp;base64,QUJD"


class TestFetchImage:

    @pytest.mark.asyncio
    async def test_content_type_from_header(self):
        http = httpx.AsyncClient(transport=image_server())
        payload = await fetch_image(http, "https://images.example/chair.jpg")
        assert payload.data == JPEG_BYTES
        assert payload.mime_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_missing_content_type_defaults_to_jpeg(self):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, content=b"raw")))
        payload = await fetch_image(http, "https://images.example/chair")
        assert payload.mime_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_http_error(self):
        http = httpx.AsyncClient(transport=image_server({"chair": httpx.Response(404)}))
        with pytest.raises(ReferenceImageError) as exc:
            await fetch_image(http, "https://images.example/chair.jpg")
        assert exc.value.upstream_status == 404


class TestBuildImageClient:

    def test_no_key_means_no_client(self):
        http = httpx.AsyncClient()
        assert build_image_client(Settings(AI_PROVIDER="xai", XAI_API_KEY="  "), http) is None
        assert build_image_client(Settings(AI_PROVIDER="gemini", GEMINI_API_KEY=None), http) is None

    def test_xai_selected(self):
        client = build_image_client(Settings(AI_PROVIDER="xai", XAI_API_KEY="k"), httpx.AsyncClient())
        assert isinstance(client, XAIImageClient)
        assert client.image_model == "grok-imagine-image"

    def test_gemini_selected(self):
        client = build_image_client(Settings(AI_PROVIDER="gemini", GEMINI_API_KEY="k"), httpx.AsyncClient())
        assert isinstance(client, GeminiImageClient)
        assert client.image_model == "gemini-2.5-flash-image"
