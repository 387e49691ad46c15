"""
Catalog Module - Models
========================
Category and Product. Product stock is owned by the cart workflow.
"""

from sqlalchemy import (
    Column, Integer, String, Text, Numeric,
    ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import relationship
from config.database import Base


# ==========================================
# 🗂️ Category
# ==========================================

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    code = Column(String(20), nullable=False, unique=True, index=True)
    name = Column(String(50), nullable=False)

    products = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category {self.code}>"


# ==========================================
# 📦 Product
# ==========================================

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(6), nullable=False, unique=True, index=True)
    name = Column(String(50), nullable=False)
    description = Column(Text, nullable=False, default="")
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    color = Column(String(50), nullable=True)
    size = Column(String(50), nullable=True)

    category = relationship("Category", back_populates="products")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_product_stock"),
    )

    @property
    def category_code(self) -> str:
        return self.category.code if self.category else ""

    def __repr__(self):
        return f"<Product {self.code} stock={self.stock}>"
