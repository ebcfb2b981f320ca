from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal, Tuple

ProductCategory = Literal["chair", "sofa", "table", "bed", "lamp", "storage"]

class Product(BaseModel):
    id: str
    name: str
    category: ProductCategory
    base_image: str
    description: str
    price: int  # whole USD
    dimensions: Optional[str] = None
    material: Optional[str] = None
    colors: List[str] = []
    in_stock: Optional[bool] = None
    featured: Optional[bool] = None

    # camelCase on the wire (baseImage, inStock), immuable = safe
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

class ProductFilters(BaseModel):
    category: Optional[ProductCategory] = None
    price_range: Optional[Tuple[int, int]] = None  # inclusive
    materials: List[str] = Field(default_factory=list)
    in_stock: Optional[bool] = None

    model_config = {"frozen": True}
