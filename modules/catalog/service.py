"""
Catalog Module - Service Layer
================================
Read-only product lookups with summary/detail projection.
An empty listing is a successful result carrying an advisory message.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from common.exceptions import ProductNotFoundError, require
from common.response import Ok, service_result
from modules.catalog.models import Category, Product
from modules.catalog.schemas import PROJECTIONS, ProductView

logger = logging.getLogger("marketplace.catalog")

EMPTY_LIST_MESSAGE = "List the product is empty"


class CatalogService:

    # ------------------------------------------
    # Lookups (used by other services)
    # ------------------------------------------

    def find_by_code(self, db: Session, product_code: str, for_update: bool = False) -> Optional[Product]:
        """Product with this code, or None. for_update locks the row until commit/rollback."""
        q = db.query(Product).filter(Product.code == product_code)
        if for_update:
            q = q.with_for_update()
        return q.first()

    def get_by_code(self, db: Session, product_code: str, for_update: bool = False) -> Product:
        product = self.find_by_code(db, product_code, for_update=for_update)
        if not product:
            raise ProductNotFoundError(product_code)
        return product

    # ------------------------------------------
    # Public queries
    # ------------------------------------------

    @service_result()
    def list_products(self, db: Session, view: ProductView = ProductView.SUMMARY):
        products = self._query(db).all()
        if not products:
            return Ok(EMPTY_LIST_MESSAGE, [])
        return Ok("List of products", self._project(products, view))

    @service_result()
    def search_by_code(self, db: Session, product_code: Optional[str], view: ProductView = ProductView.SUMMARY):
        require(product_code, "productCode")
        product = self._query(db).filter(Product.code == product_code).first()
        if not product:
            raise ProductNotFoundError(product_code)
        return Ok("Product found success", PROJECTIONS[view](product))

    @service_result()
    def search_by_category(self, db: Session, category_code: Optional[str]):
        require(category_code, "categoryCode")
        products = (
            self._query(db)
            .join(Category, Product.category_id == Category.id)
            .filter(Category.code == category_code)
            .all()
        )
        if not products:
            return Ok(EMPTY_LIST_MESSAGE, [])
        return Ok("List of products by Category", self._project(products, ProductView.SUMMARY))

    # ==========================================
    # Private helpers
    # ==========================================

    def _query(self, db: Session):
        return db.query(Product).options(joinedload(Product.category)).order_by(Product.id)

    def _project(self, products: List[Product], view: ProductView) -> list:
        projection = PROJECTIONS[view]
        return [projection(p) for p in products]


# Singleton
catalog_service = CatalogService()
