from typing import Dict, Tuple

from app.domain.models.generation import ViewConfig, ViewType

# Camera/context perspectives
VIEW_FRONT = "front"
VIEW_SIDE = "side"
VIEW_ANGLE_45 = "angle-45"
VIEW_IN_ROOM = "in-room"
VIEW_DETAIL = "detail"
VIEW_TOP = "top"

# List of all supported views (useful for validation or enums)
ALL_VIEWS: Tuple[ViewType, ...] = (VIEW_FRONT, VIEW_SIDE, VIEW_ANGLE_45, VIEW_IN_ROOM, VIEW_DETAIL, VIEW_TOP)
DEFAULT_VIEWS: Tuple[ViewType, ...] = (VIEW_FRONT, VIEW_SIDE, VIEW_ANGLE_45, VIEW_IN_ROOM)

VIEW_CONFIGS: Dict[str, ViewConfig] = {
    VIEW_FRONT: ViewConfig(
        type=VIEW_FRONT,
        label="Front View",
        description="Direct front-facing view",
        prompt_modifier="straight-on front view, centered composition",
    ),
    VIEW_SIDE: ViewConfig(
        type=VIEW_SIDE,
        label="Side View",
        description="Profile side view",
        prompt_modifier="profile side view, showing depth and proportions",
    ),
    VIEW_ANGLE_45: ViewConfig(
        type=VIEW_ANGLE_45,
        label="45° Angle",
        description="Three-quarter angle view",
        prompt_modifier="45-degree angle view, three-quarter perspective showing form and depth",
    ),
    VIEW_IN_ROOM: ViewConfig(
        type=VIEW_IN_ROOM,
        label="In Room",
        description="Lifestyle context view",
        prompt_modifier="placed in a modern, well-lit living space with complementary decor",
    ),
    VIEW_DETAIL: ViewConfig(
        type=VIEW_DETAIL,
        label="Detail",
        description="Close-up material detail",
        prompt_modifier="close-up detail shot showcasing material texture and craftsmanship",
    ),
    VIEW_TOP: ViewConfig(
        type=VIEW_TOP,
        label="Top View",
        description="Bird's eye view",
        prompt_modifier="top-down birds eye view, showing overall shape and footprint",
    ),
}

LIGHTING_DESCRIPTIONS: Dict[str, str] = {
    "studio": "professional studio lighting with soft shadows",
    "natural": "natural daylight with gentle ambient illumination",
    "dramatic": "dramatic directional lighting with defined shadows",
    "soft": "soft diffused lighting with minimal shadows",
}

BACKGROUND_DESCRIPTIONS: Dict[str, str] = {
    "minimal": "clean, minimal white/light gray background",
    "white": "pure white seamless background",
    "room": "modern interior room setting with neutral walls",
    "lifestyle": "styled lifestyle setting with complementary furniture and decor",
}

QUALITY_MODIFIERS: Dict[str, str] = {
    "standard": "4K resolution",
    "high": "8K resolution, highly detailed",
    "ultra": "8K resolution, photorealistic, ultra-detailed, ray-traced lighting",
}

# Uploads
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB, size <= MAX is accepted
ALLOWED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/jpg", "image/webp")
DEFAULT_IMAGE_MIME = "image/jpeg"

# Mock provider (no credential configured)
MOCK_MODEL = "mock-model"
MOCK_DELAY_MS = (200, 700)

DESCRIPTION_FALLBACK = "The furniture piece from the user image"
