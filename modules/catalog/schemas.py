"""
Catalog Module - Output Shapes
===============================
Two projections of the same Product row: summary and detail.
"""

import enum
from typing import Optional

from pydantic import BaseModel

from modules.catalog.models import Product


class ProductView(str, enum.Enum):
    SUMMARY = "product"
    DETAIL = "productDetail"


class ProductSummary(BaseModel):
    productCode: str
    name: str
    description: str
    categoryCode: str


class ProductDetail(ProductSummary):
    price: float
    stock: int
    color: Optional[str] = None
    size: Optional[str] = None


def to_summary(product: Product) -> ProductSummary:
    return ProductSummary(
        productCode=product.code,
        name=product.name,
        description=product.description or "",
        categoryCode=product.category_code,
    )


def to_detail(product: Product) -> ProductDetail:
    return ProductDetail(
        **to_summary(product).model_dump(),
        price=float(product.price),
        stock=product.stock,
        color=product.color,
        size=product.size,
    )


PROJECTIONS = {
    ProductView.SUMMARY: to_summary,
    ProductView.DETAIL: to_detail,
}
