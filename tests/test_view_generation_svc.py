"""Tests for ViewGenerationService: mock mode, fan-out, sequential batches."""
import asyncio

import httpx
import pytest

from app.domain.errors import UpstreamError
from app.domain.models.generation import EditedImage
from app.domain.services.constants import ALL_VIEWS, DEFAULT_VIEWS, MOCK_MODEL
from app.domain.services.view_generation_svc import ViewGenerationService, first_image

from conftest import FakeImageClient, image_server


class TestFirstImage:

    def test_empty_list_is_upstream_error(self):
        with pytest.raises(UpstreamError, match="No image was generated."):
            first_image([])

    def test_result_without_payload_is_upstream_error(self):
        with pytest.raises(UpstreamError, match="No image data or URL in response."):
            first_image([EditedImage()])

    def test_inline_data_preferred_over_url(self):
        img = first_image([EditedImage(b64_json="QUJD", url="https://cdn.example/x.png")])
        assert img.data_url == "data:image/png;base64,QUJD"

    def test_url_used_when_no_inline_data(self):
        img = first_image([EditedImage(url="https://cdn.example/x.png"), EditedImage(b64_json="QUJD")])
        assert img.data_url == "https://cdn.example/x.png"


class TestMockMode:

    @pytest.mark.asyncio
    async def test_every_product_and_view_echoes_base_image(self, repo, http):
        svc = ViewGenerationService(None, http)
        assert not svc.is_available
        for product in repo.list():
            for view in ALL_VIEWS:
                res = await svc.generate_view(product, view)
                assert res.success is True
                assert res.error is None
                assert res.image_url == product.base_image
                assert res.metadata.model == MOCK_MODEL
                assert res.metadata.generation_time >= 200
                assert res.metadata.prompt_used.startswith("Generate a high-quality")


class TestGenerateView:

    @pytest.mark.asyncio
    async def test_sends_reference_and_prompt_to_edit(self, product, http, fake_client):
        svc = ViewGenerationService(fake_client, http)
        res = await svc.generate_view(product, "side")

        assert res.success is True
        assert res.image_url == "data:image/png;base64,aGVsbG8="
        assert res.metadata.model == "fake-image-model"
        reference, prompt = fake_client.edit_image.await_args.args
        assert reference.mime_type == "image/jpeg"
        assert reference.data_url.startswith("data:image/jpeg;base64,")
        assert "profile side view" in prompt
        fake_client.describe_image.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure_folded_into_envelope(self, product, http):
        client = FakeImageClient()
        client.edit_image.side_effect = UpstreamError("quota exceeded", upstream_status=429)
        res = await ViewGenerationService(client, http).generate_view(product, "front")
        assert res.success is False
        assert res.error == "quota exceeded"
        assert res.image_url is None

    @pytest.mark.asyncio
    async def test_render_view_raises_on_empty_result(self, product, http):
        client = FakeImageClient(results=[])
        with pytest.raises(UpstreamError, match="No image was generated."):
            await ViewGenerationService(client, http).render_view(product, "front")

    @pytest.mark.asyncio
    async def test_unreachable_base_image(self, product, fake_client):
        broken = httpx.AsyncClient(transport=image_server({"unsplash": httpx.Response(404)}))
        res = await ViewGenerationService(fake_client, broken).generate_view(product, "front")
        assert res.success is False
        assert "404" in res.error
        fake_client.edit_image.assert_not_called()

    @pytest.mark.asyncio
    async def test_unexpected_exception_folded_into_envelope(self, product, http):
        client = FakeImageClient()
        client.edit_image.side_effect = RuntimeError("boom")
        res = await ViewGenerationService(client, http).generate_view(product, "front")
        assert res.success is False
        assert res.error == "boom"


def _view_of(prompt: str) -> str:
    if "straight-on front view" in prompt:
        return "front"
    if "profile side view" in prompt:
        return "side"
    return "other"


class TestGenerateAllViews:

    @pytest.mark.asyncio
    async def test_keyed_by_view_regardless_of_completion_order(self, product, http):
        completed = []

        async def edit(image, prompt):
            view = _view_of(prompt)
            # front finishes last
            await asyncio.sleep(0.05 if view == "front" else 0)
            completed.append(view)
            return [EditedImage(url=f"https://cdn.example/{view}.png")]

        client = FakeImageClient()
        client.edit_image.side_effect = edit
        results = await ViewGenerationService(client, http).generate_all_views(product, ["front", "side"])

        assert completed == ["side", "front"]
        assert set(results) == {"front", "side"}
        assert results["front"].image_url == "https://cdn.example/front.png"
        assert results["side"].image_url == "https://cdn.example/side.png"

    @pytest.mark.asyncio
    async def test_default_views(self, product, http):
        results = await ViewGenerationService(None, http).generate_all_views(product)
        assert list(results) == list(DEFAULT_VIEWS)

    @pytest.mark.asyncio
    async def test_one_failure_does_not_sink_the_others(self, product, http):
        async def edit(image, prompt):
            if _view_of(prompt) == "side":
                raise UpstreamError("Image generation failed: 500")
            return [EditedImage(b64_json="QUJD")]

        client = FakeImageClient()
        client.edit_image.side_effect = edit
        results = await ViewGenerationService(client, http).generate_all_views(product, ["front", "side"])
        assert results["front"].success is True
        assert results["side"].success is False
        assert results["side"].error == "Image generation failed: 500"


class TestBatchGenerateViews:

    @pytest.mark.asyncio
    async def test_products_processed_one_after_another(self, repo, http):
        events = []

        async def edit(image, prompt):
            name = prompt.split("- Name: ", 1)[1].split("\n", 1)[0]
            events.append(("start", name))
            await asyncio.sleep(0.01)
            events.append(("end", name))
            return [EditedImage(b64_json="QUJD")]

        client = FakeImageClient()
        client.edit_image.side_effect = edit
        products = repo.list()[:3]
        results = await ViewGenerationService(client, http).batch_generate_views(products, ["front", "side"])

        assert list(results) == [p.id for p in products]
        assert all(set(views) == {"front", "side"} for views in results.values())

        # every event of product N precedes every event of product N+1
        order = [name for _, name in events]
        for earlier, later in zip(products, products[1:]):
            last_earlier = max(i for i, n in enumerate(order) if n == earlier.name)
            first_later = min(i for i, n in enumerate(order) if n == later.name)
            assert last_earlier < first_later
