"""
Shared pytest fixtures.

The AI provider is replaced at the dependency boundary:
    route → service → ImageModelClient.describe_image / edit_image
                       ↑ FakeImageClient (AsyncMock methods) or a real
                         XAIImageClient over httpx.MockTransport
"""
from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import http_client, image_client
from app.core.config import Settings, get_settings
from app.domain.models.generation import EditedImage
from app.domain.repositories.product_repo import ProductRepo
from app.main import app

# Smallest valid-looking PNG header; content is never decoded
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


class FakeImageClient:
    """ImageModelClient double with AsyncMock methods for call assertions."""

    name = "fake"
    image_model = "fake-image-model"

    def __init__(self, description: Optional[str] = "gray fabric 3-seater sofa", results: Optional[List[EditedImage]] = None):
        self.describe_image = AsyncMock(return_value=description)
        self.edit_image = AsyncMock(
            return_value=results if results is not None else [EditedImage(b64_json="aGVsbG8=")]
        )


def image_server(overrides: Optional[Dict[str, httpx.Response]] = None, fallback: Optional[Callable] = None) -> httpx.MockTransport:
    """
    MockTransport that serves JPEG bytes for any GET.
    `overrides` maps a URL substring to a canned response.
    `fallback` handles non-GET requests (vendor endpoints).
    """
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        for needle, response in overrides.items():
            if needle in str(request.url):
                return response
        if request.method == "GET":
            return httpx.Response(200, content=JPEG_BYTES, headers={"content-type": "image/jpeg"})
        if fallback is not None:
            return fallback(request)
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def repo() -> ProductRepo:
    return ProductRepo()


@pytest.fixture
def product(repo):
    return repo.get_by_product_id("oslo-lounge-chair")


@pytest.fixture
def fake_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture
def http() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=image_server())


@pytest.fixture
def settings() -> Settings:
    return Settings(AI_PROVIDER="xai", NEXT_PUBLIC_ELEVENLABS_AGENT_ID=None)


@pytest.fixture
def make_api(settings, http):
    """
    Build a TestClient with the given provider client (None = no credential).
    Overrides are cleared after the test.
    """
    def _make(client=None, http_override: Optional[httpx.AsyncClient] = None, settings_override: Optional[Settings] = None) -> TestClient:
        app.dependency_overrides[image_client] = lambda: client
        app.dependency_overrides[http_client] = lambda: http_override or http
        app.dependency_overrides[get_settings] = lambda: settings_override or settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
