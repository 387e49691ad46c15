"""
Cart Module - Schemas
======================
Request body for add-to-cart and the cart line output shape.
"""

from pydantic import BaseModel, Field, StrictInt

from config.settings import PRODUCT_CODE_MAX_LENGTH


class AddToCartRequest(BaseModel):
    productCode: str = Field(..., min_length=1, max_length=PRODUCT_CODE_MAX_LENGTH)
    quantity: StrictInt = Field(..., gt=0)


class CartLineView(BaseModel):
    productCode: str
    quantity: int
