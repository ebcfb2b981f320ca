# app/api/v1/routers/generation.py
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from typing import List, Optional
import time
import logging

from app.api.deps import product_repo, view_service
from app.api.v1.schemas.generation import (
    ErrorOut,
    GenerateViewIn,
    GenerateViewOut,
    GenerateViewsIn,
    GenerateViewsOut,
)
from app.domain.errors import AppError, ClientInputError, NotFoundError
from app.domain.models.generation import GeneratedView, ViewConfig
from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.constants import DEFAULT_VIEWS, VIEW_CONFIGS
from app.domain.services.view_generation_svc import ViewGenerationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])

_ERROR_RESPONSES = {code: {"model": ErrorOut} for code in (400, 404, 500, 502)}


def _internal_error(e: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(e) or "Internal server error"},
    )


@router.get("/views", response_model=List[ViewConfig], response_model_by_alias=True)
async def list_views():
    """The six supported camera/context perspectives."""
    return list(VIEW_CONFIGS.values())


@router.post(
    "/generate-view",
    response_model=GenerateViewOut,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def generate_view(
    body: GenerateViewIn,
    repo: ProductRepo = Depends(product_repo),
    svc: ViewGenerationService = Depends(view_service),
):
    """
    Re-render one catalog product from the requested view.
    Without a provider credential the product's base image is echoed (model "mock-model").
    """
    logger.info("Request: generate_view product_id=%s, view_type=%s", body.product_id, body.view_type)
    start_time = time.perf_counter()

    if not body.product_id or not body.view_type:
        raise ClientInputError("Missing productId or viewType")

    product = repo.get_by_product_id(body.product_id)
    if not product:
        raise NotFoundError("Product not found")

    if body.view_type not in VIEW_CONFIGS:
        raise ClientInputError("Invalid view type")

    try:
        res = await svc.render_view(product, body.view_type, body.options)
    except AppError:
        raise
    except Exception as e:
        logger.exception("API Error: generate_view product_id=%s", product.id)
        return _internal_error(e)

    logger.info(
        "Response: generate_view product_id=%s, model=%s, elapsed_time=%.4fs",
        product.id, res.metadata.model if res.metadata else None, time.perf_counter() - start_time,
    )
    return GenerateViewOut(image_url=res.image_url, metadata=res.metadata)


@router.post(
    "/products/{product_id}/views",
    response_model=GenerateViewsOut,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def generate_product_views(
    product_id: str,
    body: Optional[GenerateViewsIn] = Body(None),
    repo: ProductRepo = Depends(product_repo),
    svc: ViewGenerationService = Depends(view_service),
):
    """
    Gallery pre-generation: every requested view of one product, concurrently.
    Per-view failures are reported inline; the request itself still succeeds.
    """
    body = body or GenerateViewsIn()
    view_types = body.view_types or list(DEFAULT_VIEWS)
    logger.info("Request: generate_product_views product_id=%s, views=%s", product_id, view_types)
    start_time = time.perf_counter()

    product = repo.get_by_product_id(product_id)
    if not product:
        raise NotFoundError("Product not found")

    invalid = [vt for vt in view_types if vt not in VIEW_CONFIGS]
    if invalid:
        raise ClientInputError(f"Invalid view type: {', '.join(invalid)}")

    try:
        results = await svc.generate_all_views(product, view_types, body.options)
    except Exception as e:
        logger.exception("API Error: generate_product_views product_id=%s", product_id)
        return _internal_error(e)

    views = {}
    for vt, res in results.items():
        if res.success and res.image_url:
            views[vt] = GeneratedView(
                view_type=vt,
                image_url=res.image_url,
                cached=res.image_url == product.base_image,
            )
        else:
            views[vt] = ErrorOut(error=res.error or "Generation failed")

    ok = sum(1 for v in views.values() if isinstance(v, GeneratedView))
    logger.info(
        "Response: generate_product_views product_id=%s, ok=%d/%d, elapsed_time=%.4fs",
        product_id, ok, len(views), time.perf_counter() - start_time,
    )
    return GenerateViewsOut(product_id=product_id, views=views)
