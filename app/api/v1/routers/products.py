# app/api/v1/routers/products.py

from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import logging

from app.api.deps import product_repo
from app.domain.errors import ClientInputError, NotFoundError
from app.domain.models.product import Product, ProductCategory, ProductFilters
from app.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=List[Product])
async def list_products(
    category: Optional[ProductCategory] = Query(None),
    min_price: Optional[int] = Query(None, ge=0),
    max_price: Optional[int] = Query(None, ge=0),
    materials: List[str] = Query(default=[], description="Any-of, case-insensitive substring of material"),
    in_stock: Optional[bool] = Query(None),
    q: Optional[str] = Query(None, description="Search name, description and material"),
    repo: ProductRepo = Depends(product_repo),
):
    """Catalog listing with the storefront filters. A price bound left out is open-ended."""
    price_range = None
    if min_price is not None or max_price is not None:
        lo, hi = repo.price_range()
        price_range = (min_price if min_price is not None else lo, max_price if max_price is not None else hi)
        if price_range[0] > price_range[1]:
            raise ClientInputError("min_price must not exceed max_price")

    filters = ProductFilters(category=category, price_range=price_range, materials=materials, in_stock=in_stock)
    items = repo.list(filters)
    if q:
        matching = {p.id for p in repo.search(q)}
        items = [p for p in items if p.id in matching]

    logger.debug("list_products filters=%s q=%s count=%d", filters, q, len(items))
    return items


@router.get("/products/featured", response_model=List[Product])
async def featured_products(repo: ProductRepo = Depends(product_repo)):
    return repo.featured()


@router.get("/products/categories", response_model=List[str])
async def product_categories(repo: ProductRepo = Depends(product_repo)):
    return repo.categories()


@router.get("/products/price-range")
async def product_price_range(repo: ProductRepo = Depends(product_repo)):
    lo, hi = repo.price_range()
    return {"min": lo, "max": hi}


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str, repo: ProductRepo = Depends(product_repo)):
    product = repo.get_by_product_id(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product


@router.get("/products/{product_id}/related", response_model=List[Product])
async def related_products(
    product_id: str,
    limit: int = Query(4, ge=1, le=20),
    repo: ProductRepo = Depends(product_repo),
):
    """Same category, excluding the product itself."""
    if not repo.get_by_product_id(product_id):
        raise NotFoundError("Product not found")
    return repo.related(product_id, limit=limit)
