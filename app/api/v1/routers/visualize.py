# app/api/v1/routers/visualize.py
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from typing import Optional
import time
import logging

import httpx

from app.api.deps import http_client, image_client, product_repo
from app.api.v1.schemas.generation import ErrorOut, VisualizeOut
from app.core.config import Settings, get_settings
from app.domain.errors import AppError, ClientInputError, ConfigurationError, ReferenceImageError
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.room_visualization_svc import RoomVisualizationService
from app.providers.base import ImageModelClient
from app.utils.images import ImagePayload, fetch_image, validate_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["visualize"])


def _is_present(upload: Optional[UploadFile]) -> bool:
    # browsers send an empty part (no filename) for an untouched file input
    return upload is not None and bool(upload.filename)


async def _validated(upload: UploadFile, field_name: str, max_bytes: int) -> ImagePayload:
    data = await upload.read()
    return validate_upload(field_name, data, upload.content_type, max_bytes=max_bytes)


@router.post(
    "/visualize-furniture",
    response_model=VisualizeOut,
    response_model_exclude_none=True,
    responses={code: {"model": ErrorOut} for code in (400, 500, 502)},
)
async def visualize_furniture(
    room_image: Optional[UploadFile] = File(None, alias="roomImage"),
    furniture_product_id: Optional[str] = Form(None, alias="furnitureProductId"),
    furniture_image: Optional[UploadFile] = File(None, alias="furnitureImage"),
    settings: Settings = Depends(get_settings),
    client: Optional[ImageModelClient] = Depends(image_client),
    http: httpx.AsyncClient = Depends(http_client),
    repo: ProductRepo = Depends(product_repo),
):
    """
    Place a furniture piece into the uploaded room photo.
    The piece is either a catalog item (furnitureProductId) or a second upload (furnitureImage).
    Every input check runs before the first vendor call.
    """
    logger.info(
        "Request: visualize_furniture product_id=%s, furniture_upload=%s",
        furniture_product_id, _is_present(furniture_image),
    )
    start_time = time.perf_counter()

    if client is None:
        logger.error("%s is not configured", settings.provider_key_name)
        raise ConfigurationError(f"{settings.provider_key_name} is not configured")

    if not _is_present(room_image):
        raise ClientInputError("Room image is required.")

    max_bytes = settings.max_upload_bytes
    try:
        if _is_present(furniture_image):
            room = await _validated(room_image, "Room image", max_bytes)
            item = await _validated(furniture_image, "Furniture image", max_bytes)
        else:
            pid = (furniture_product_id or "").strip()
            if not pid:
                raise ClientInputError("Please select a furniture piece from our collection.")
            product = repo.get_by_product_id(pid)
            if not product or not product.base_image:
                raise ClientInputError("Selected furniture is not available.")
            room = await _validated(room_image, "Room image", max_bytes)
            try:
                item = await fetch_image(http, product.base_image)
            except ReferenceImageError as e:
                raise ClientInputError("Could not load the selected furniture image.") from e

        image = await RoomVisualizationService(client).visualize(item, room)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Visualize-furniture API error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e) or "Internal server error"},
        )

    logger.info("Response: visualize_furniture elapsed_time=%.4fs", time.perf_counter() - start_time)
    if image.b64_json:
        return VisualizeOut(
            image=image.b64_json,
            mime_type=image.mime_type,
            data_url=image.data_url,
            url=image.url,
        )
    return VisualizeOut(url=image.url, data_url=image.url, mime_type=image.mime_type)
