"""
Cart Routes
=============
Shared cart detail, add product, delete product.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.database import get_db
from common.response import to_response
from modules.cart.schemas import AddToCartRequest
from modules.cart.service import cart_service

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


# ==========================================
# 🛒 View Cart
# ==========================================

@router.get("/detail-shopping-cart")
async def detail_shopping_cart(db: Session = Depends(get_db)):
    return to_response(cart_service.get_cart_detail(db))


# ==========================================
# ➕ Add Product
# ==========================================

@router.post("/add-product-shopping-cart")
async def add_product_shopping_cart(
    body: AddToCartRequest,
    db: Session = Depends(get_db),
):
    """400 on bad body or insufficient stock, 404 for an unknown product."""
    return to_response(cart_service.add_product(db, body.productCode, body.quantity))


# ==========================================
# ➖ Delete Product
# ==========================================

@router.delete("/delete-product-shopping-cart")
async def delete_product_shopping_cart(
    productCode: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return to_response(cart_service.remove_product(db, productCode))
