# app/api/v1/schemas/generation.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional, Union

from app.domain.models.generation import AIGenerationOptions, GeneratedView, GenerationMetadata

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorOut(BaseModel):
    success: bool = False
    error: str


class GenerateViewIn(BaseModel):
    # presence and enum membership are checked by the route, in storefront order
    product_id: Optional[str] = None
    view_type: Optional[str] = None
    options: Optional[AIGenerationOptions] = None

    model_config = _CAMEL


class GenerateViewOut(BaseModel):
    success: bool = True
    image_url: str
    metadata: Optional[GenerationMetadata] = None

    model_config = _CAMEL


class GenerateViewsIn(BaseModel):
    view_types: Optional[List[str]] = None
    options: Optional[AIGenerationOptions] = None

    model_config = _CAMEL


class GenerateViewsOut(BaseModel):
    success: bool = True
    product_id: str
    views: Dict[str, Union[GeneratedView, ErrorOut]]

    model_config = _CAMEL


class VisualizeOut(BaseModel):
    success: bool = True
    image: Optional[str] = None      # raw base64, when the vendor inlined it
    mime_type: str
    data_url: str
    url: Optional[str] = None

    model_config = _CAMEL


class ConvaiConfigOut(BaseModel):
    success: bool = True
    agent_id: str

    model_config = _CAMEL
