# app/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Optional, List, Sequence, Tuple

from app.domain.catalog import PRODUCTS
from app.domain.models.product import Product, ProductCategory, ProductFilters

class ProductRepo:
    """
    Read-only product repository over the in-memory catalog.
    The backing tuple is never mutated, so one instance can be shared
    by every request.
    """

    def __init__(self, products: Sequence[Product] = PRODUCTS):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id = {p.id: p for p in self._products}

    def get_by_product_id(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def list(self, filters: Optional[ProductFilters] = None) -> List[Product]:
        """All products, narrowed by every filter that is set."""
        items = list(self._products)
        if filters is None:
            return items

        if filters.category:
            items = self.by_category(filters.category)

        if filters.price_range:
            lo, hi = filters.price_range
            items = [p for p in items if lo <= p.price <= hi]

        if filters.materials:
            wanted = [m.lower() for m in filters.materials]
            items = [
                p for p in items
                if p.material and any(m in p.material.lower() for m in wanted)
            ]

        if filters.in_stock is not None:
            items = [p for p in items if p.in_stock == filters.in_stock]

        return items

    def featured(self) -> List[Product]:
        return [p for p in self._products if p.featured]

    def by_category(self, category: ProductCategory) -> List[Product]:
        return [p for p in self._products if p.category == category]

    def categories(self) -> List[str]:
        # first-seen order
        return list(dict.fromkeys(p.category for p in self._products))

    def related(self, product_id: str, limit: int = 4) -> List[Product]:
        """Same category, excluding the product itself."""
        product = self.get_by_product_id(product_id)
        if not product:
            return []
        return [
            p for p in self._products
            if p.id != product_id and p.category == product.category
        ][:limit]

    def search(self, query: str) -> List[Product]:
        q = query.lower()
        return [
            p for p in self._products
            if q in p.name.lower()
            or q in p.description.lower()
            or (p.material and q in p.material.lower())
        ]

    def price_range(self) -> Tuple[int, int]:
        prices = [p.price for p in self._products]
        return min(prices), max(prices)
