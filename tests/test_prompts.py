"""Tests for the view prompt builder and the room edit prompt."""
import itertools

import pytest

from app.domain.models.generation import AIGenerationOptions
from app.domain.services.constants import (
    ALL_VIEWS,
    BACKGROUND_DESCRIPTIONS,
    LIGHTING_DESCRIPTIONS,
    QUALITY_MODIFIERS,
    VIEW_CONFIGS,
)
from app.domain.services.prompts import build_edit_prompt, build_prompt


class TestBuildPrompt:

    def test_deterministic_for_every_view_and_option(self, product):
        combos = itertools.product(ALL_VIEWS, LIGHTING_DESCRIPTIONS, BACKGROUND_DESCRIPTIONS, QUALITY_MODIFIERS)
        for view, lighting, background, quality in combos:
            opts = AIGenerationOptions(lighting=lighting, background=background, quality=quality)
            first = build_prompt(product, view, opts)
            again = build_prompt(product, view, AIGenerationOptions(lighting=lighting, background=background, quality=quality))
            assert first == again

    def test_defaults_applied(self, product):
        prompt = build_prompt(product, "front")
        assert LIGHTING_DESCRIPTIONS["studio"] in prompt
        assert BACKGROUND_DESCRIPTIONS["minimal"] in prompt
        assert QUALITY_MODIFIERS["high"] in prompt
        assert prompt == build_prompt(product, "front", AIGenerationOptions())

    def test_in_room_forces_lifestyle_background(self, product):
        prompt = build_prompt(product, "in-room", AIGenerationOptions(background="white"))
        assert BACKGROUND_DESCRIPTIONS["lifestyle"] in prompt
        assert BACKGROUND_DESCRIPTIONS["white"] not in prompt

    def test_other_views_honor_background(self, product):
        prompt = build_prompt(product, "side", AIGenerationOptions(background="white"))
        assert f"- Background: {BACKGROUND_DESCRIPTIONS['white']}" in prompt

    @pytest.mark.parametrize("view", ALL_VIEWS)
    def test_view_modifier_and_label(self, product, view):
        prompt = build_prompt(product, view)
        cfg = VIEW_CONFIGS[view]
        assert cfg.prompt_modifier in prompt
        assert f"photorealistic {cfg.label.lower()} of this furniture piece" in prompt

    def test_product_identity_and_preservation(self, product):
        prompt = build_prompt(product, "detail", AIGenerationOptions(quality="ultra", lighting="dramatic"))
        assert f"- Name: {product.name}" in prompt
        assert "- Category: chair" in prompt
        assert f"- Material: {product.material}" in prompt
        assert f"- Dimensions: {product.dimensions}" in prompt
        assert "CRITICAL PRESERVATION:" in prompt
        assert "Preserve precise color accuracy and tones" in prompt
        assert QUALITY_MODIFIERS["ultra"] in prompt
        assert LIGHTING_DESCRIPTIONS["dramatic"] in prompt

    def test_missing_material_and_dimensions_fall_back(self, product):
        bare = product.model_copy(update={"material": None, "dimensions": None})
        prompt = build_prompt(bare, "top")
        assert "- Material: as shown in reference image" in prompt
        assert "- Dimensions: maintain original proportions" in prompt

    def test_unknown_view_is_a_programming_error(self, product):
        with pytest.raises(KeyError):
            build_prompt(product, "isometric")


def test_edit_prompt_embeds_description():
    prompt = build_edit_prompt("navy blue velvet armchair")
    assert "navy blue velvet armchair" in prompt
    assert "Keep the room exactly as it is" in prompt
