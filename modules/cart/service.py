"""
Cart Module - Service Layer
==============================
The shared cart workflow: add/remove products with stock bookkeeping.

Each mutation runs in one transaction (committed or rolled back by
service_result). Stock moves through conditional UPDATEs so a stale read
can never drive stock negative or lose a concurrent decrement.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from config.settings import SHARED_CART_NAME
from common.exceptions import (
    BadRequestError, InsufficientStockError, ProductNotInCartError, require,
)
from common.response import Ok, service_result
from modules.cart.models import Cart, CartLine
from modules.cart.schemas import CartLineView
from modules.catalog.models import Product
from modules.catalog.service import catalog_service

logger = logging.getLogger("marketplace.cart")

EMPTY_CART_MESSAGE = "The Shopping cart is empty"


class CartService:

    def get_cart(self, db: Session) -> Optional[Cart]:
        return db.query(Cart).filter(Cart.name == SHARED_CART_NAME).first()

    def get_or_create_cart(self, db: Session) -> Cart:
        """
        Get the shared cart, creating it on first use.

        The insert runs in a savepoint: losing the race to another request
        only undoes the insert, not the caller's stock update.
        """
        cart = self.get_cart(db)
        if cart:
            return cart
        try:
            with db.begin_nested():
                cart = Cart(name=SHARED_CART_NAME)
                db.add(cart)
            return cart
        except IntegrityError:
            # Race condition: another request created the shared cart
            cart = self.get_cart(db)
            if cart:
                logger.info("Shared cart created concurrently, reusing it")
                return cart
            raise

    def find_line(self, db: Session, cart_id: int, product_id: int) -> Optional[CartLine]:
        return (
            db.query(CartLine)
            .filter(CartLine.cart_id == cart_id, CartLine.product_id == product_id)
            .with_for_update()
            .first()
        )

    # ------------------------------------------
    # Add / Remove
    # ------------------------------------------

    @service_result(commit=True)
    def add_product(self, db: Session, product_code: Optional[str], quantity) -> Ok:
        """
        Take `quantity` units of a product out of stock and into the cart.
        Repeated adds of the same product accumulate on one line.
        """
        require(product_code, "productCode")
        self._validate_quantity(quantity)

        product = catalog_service.get_by_code(db, product_code, for_update=True)
        if product.stock - quantity < 0:
            raise InsufficientStockError()
        self._adjust_stock(db, product, -quantity)

        cart = self.get_or_create_cart(db)
        line = self.find_line(db, cart.id, product.id)
        if line:
            db.query(CartLine).filter(CartLine.id == line.id).update(
                {CartLine.quantity: CartLine.quantity + quantity},
                synchronize_session=False,
            )
            db.expire(line, ["quantity"])
        else:
            db.add(CartLine(cart_id=cart.id, product_id=product.id, quantity=quantity))
        db.flush()

        logger.info(f"Added {quantity} x {product_code} to cart (stock now {product.stock})")
        return Ok("product added to shopping cart successfully")

    @service_result(commit=True)
    def remove_product(self, db: Session, product_code: Optional[str]) -> Ok:
        """Drop the product's whole line from the cart and return its quantity to stock."""
        require(product_code, "productCode")
        product = catalog_service.get_by_code(db, product_code, for_update=True)

        cart = self.get_cart(db)
        line = self.find_line(db, cart.id, product.id) if cart else None
        if not line:
            raise ProductNotInCartError()

        quantity = line.quantity
        db.delete(line)
        db.flush()
        self._adjust_stock(db, product, quantity)

        logger.info(f"Removed {product_code} from cart, restored {quantity} (stock now {product.stock})")
        return Ok("product delete to shopping cart successfully")

    # ------------------------------------------
    # Queries
    # ------------------------------------------

    @service_result()
    def get_cart_detail(self, db: Session) -> Ok:
        """Every cart line as {productCode, quantity}, in insertion order."""
        cart = self.get_cart(db)
        lines = []
        if cart:
            lines = (
                db.query(CartLine)
                .options(joinedload(CartLine.product))
                .filter(CartLine.cart_id == cart.id)
                .order_by(CartLine.id)
                .all()
            )
        if not lines:
            return Ok(EMPTY_CART_MESSAGE, [])
        return Ok("Detail the shopping cart", [
            CartLineView(productCode=line.product.code, quantity=line.quantity)
            for line in lines
        ])

    # ==========================================
    # Private helpers
    # ==========================================

    def _validate_quantity(self, quantity):
        if quantity is None:
            raise BadRequestError("Quantity is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise BadRequestError("Quantity must be a number")
        if quantity <= 0:
            raise BadRequestError("Quantity must be greater than zero")

    def _adjust_stock(self, db: Session, product: Product, change: int):
        """Apply `change` to stock in SQL; a decrement only lands if stock covers it."""
        q = db.query(Product).filter(Product.id == product.id)
        if change < 0:
            q = q.filter(Product.stock >= -change)
        updated = q.update({Product.stock: Product.stock + change}, synchronize_session=False)
        if not updated:
            raise InsufficientStockError()
        db.expire(product, ["stock"])


# Singleton
cart_service = CartService()
