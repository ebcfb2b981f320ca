from typing import Optional

from app.domain.models.generation import AIGenerationOptions
from app.domain.models.product import Product
from app.domain.services.constants import (
    VIEW_CONFIGS,
    VIEW_IN_ROOM,
    LIGHTING_DESCRIPTIONS,
    BACKGROUND_DESCRIPTIONS,
    QUALITY_MODIFIERS,
)

FURNITURE_DESCRIPTION_PROMPT = (
    "You are describing a furniture piece so an image model can draw it exactly in another image. "
    "Look at this image and describe ONLY what you see. Be very specific:\n"
    '- Exact type (e.g. "gray fabric 3-seater L-shaped sectional sofa", "oak wood coffee table with four legs", '
    '"white bookshelf with 5 shelves").\n'
    '- Exact colors (e.g. "navy blue", "light oak", "matte black").\n'
    "- Material and finish (e.g. fabric/leather/wood/metal, glossy/matte).\n"
    "- Shape, proportions, and any distinctive details (armrests, legs, drawers, cushions).\n"
    "- Style if clear (modern, mid-century, rustic, etc.).\n"
    "Output ONLY this description. No preamble. The image model will add this exact piece to a room, "
    "so the description must be precise enough to draw it correctly."
)


def build_prompt(product: Product, view_type: str, options: Optional[AIGenerationOptions] = None) -> str:
    """
    Instruction for re-rendering `product` from `view_type`.
    Pure: same inputs, same string. The in-room view always uses the
    lifestyle background, whatever `options.background` says.
    """
    options = options or AIGenerationOptions()
    view = VIEW_CONFIGS[view_type]
    background_key = "lifestyle" if view_type == VIEW_IN_ROOM else options.background

    return (
        f"Generate a high-quality, photorealistic {view.label.lower()} of this furniture piece.\n\n"
        "PRODUCT DETAILS:\n"
        f"- Name: {product.name}\n"
        f"- Category: {product.category}\n"
        f"- Material: {product.material or 'as shown in reference image'}\n"
        f"- Dimensions: {product.dimensions or 'maintain original proportions'}\n\n"
        "VIEW SPECIFICATIONS:\n"
        f"{view.prompt_modifier}\n\n"
        "VISUAL REQUIREMENTS:\n"
        f"- Lighting: {LIGHTING_DESCRIPTIONS[options.lighting]}\n"
        f"- Background: {BACKGROUND_DESCRIPTIONS[background_key]}\n"
        f"- Quality: {QUALITY_MODIFIERS[options.quality]}\n\n"
        "CRITICAL PRESERVATION:\n"
        "- Maintain exact material textures and finishes from the reference\n"
        "- Preserve precise color accuracy and tones\n"
        "- Keep proportions and dimensions accurate\n"
        "- Ensure realistic shadows and reflections\n"
        "- Match the design language and style exactly\n\n"
        "OUTPUT:\n"
        "Photorealistic product photography quality, suitable for e-commerce and marketing materials."
    )


def build_edit_prompt(furniture_description: str) -> str:
    return (
        "TASK: Add ONE piece of furniture to the room in this image. The furniture you add MUST be exactly "
        "as described below. No other furniture, no generic or random items.\n\n"
        "FURNITURE TO ADD (add only this, and make it look exactly like this description):\n"
        f"{furniture_description}\n\n"
        "RULES: Keep the room exactly as it is. Do not change the room. Place the described furniture "
        "naturally on the floor in a sensible spot. The added furniture must look exactly like the "
        "description above: same type, same colors, same style. Do not add a different piece of "
        "furniture. No floating, no clipping."
    )
