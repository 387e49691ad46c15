"""
Catalog Module - Routes
=========================
Product listing and lookup under /marketplace.
Every endpoint answers with the {status, message, data} envelope.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.database import get_db
from common.response import to_response
from modules.catalog.schemas import ProductView
from modules.catalog.service import catalog_service

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


@router.get("/all-products")
async def all_products(db: Session = Depends(get_db)):
    """All products (summary view). An empty catalog is still 200."""
    return to_response(catalog_service.list_products(db))


@router.get("/search-product-with-code")
async def search_product_with_code(
    productCode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return to_response(catalog_service.search_by_code(db, productCode, ProductView.SUMMARY))


@router.get("/search-product-detail-with-code")
async def search_product_detail_with_code(
    productCode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return to_response(catalog_service.search_by_code(db, productCode, ProductView.DETAIL))


@router.get("/search-products-by-category-code")
async def search_products_by_category_code(
    categoryCode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return to_response(catalog_service.search_by_category(db, categoryCode))
