# app/api/deps.py
from functools import lru_cache
from typing import Optional

import httpx
from fastapi import Depends, Request

from app.domain.repositories.product_repo import ProductRepo
from app.domain.services.view_generation_svc import ViewGenerationService
from app.providers.base import ImageModelClient

# Dependency for the read-only catalog (immutable, safe to share)
@lru_cache
def product_repo() -> ProductRepo:
    return ProductRepo()

# Shared outbound HTTP client, created in the lifespan
def http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http

# Selected AI provider, or None when its credential is not configured
def image_client(request: Request) -> Optional[ImageModelClient]:
    return getattr(request.app.state, "image_client", None)

def view_service(
    client: Optional[ImageModelClient] = Depends(image_client),
    http: httpx.AsyncClient = Depends(http_client),
) -> ViewGenerationService:
    return ViewGenerationService(client, http)
