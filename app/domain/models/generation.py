from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ViewType = Literal["front", "side", "angle-45", "in-room", "detail", "top"]
Lighting = Literal["studio", "natural", "dramatic", "soft"]
Background = Literal["minimal", "white", "room", "lifestyle"]
Quality = Literal["standard", "high", "ultra"]
AspectRatio = Literal["1:1", "4:3", "16:9", "3:4"]

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# vendors return PNG unless they say otherwise
GENERATED_IMAGE_MIME = "image/png"


class ViewConfig(BaseModel):
    type: ViewType
    label: str
    description: str
    prompt_modifier: str

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class AIGenerationOptions(BaseModel):
    lighting: Lighting = "studio"
    background: Background = "minimal"
    quality: Quality = "high"
    aspect_ratio: Optional[AspectRatio] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GenerationMetadata(BaseModel):
    model: str
    generation_time: float  # milliseconds
    prompt_used: str

    model_config = _CAMEL


class AIGenerationResponse(BaseModel):
    """Result envelope of one view generation. Built per request, never stored."""
    success: bool
    image_url: Optional[str] = None
    error: Optional[str] = None
    metadata: Optional[GenerationMetadata] = None

    model_config = _CAMEL


class GeneratedView(BaseModel):
    view_type: ViewType
    image_url: str
    generated_at: datetime = Field(default_factory=datetime.now)
    cached: bool = False  # True when the image is the untouched base image

    model_config = _CAMEL


class EditedImage(BaseModel):
    """First result of an image-edit call: inline base64 data, a remote URL, or both."""
    b64_json: Optional[str] = None
    url: Optional[str] = None
    mime_type: str = GENERATED_IMAGE_MIME

    @property
    def data_url(self) -> Optional[str]:
        if self.b64_json:
            return f"data:{self.mime_type};base64,{self.b64_json}"
        return self.url
