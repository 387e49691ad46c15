"""
Shared fixtures: in-memory SQLite database, sessions, seeded catalog, API client.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base, get_db
from main import app
from modules.catalog.models import Category, Product
from modules.cart.models import Cart, CartLine  # noqa: F401

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session_factory():
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_product(db):
    """Create (and commit) a product, creating its category on demand."""
    def _make(code="A1", stock=10, category_code="CAT1", **fields):
        category = db.query(Category).filter(Category.code == category_code).first()
        if not category:
            category = Category(code=category_code, name=f"Category {category_code}")
            db.add(category)
            db.flush()
        product = Product(
            code=code,
            name=fields.pop("name", f"Product {code}"),
            description=fields.pop("description", f"Description of {code}"),
            category_id=category.id,
            price=fields.pop("price", Decimal("25.50")),
            stock=stock,
            color=fields.pop("color", "Red"),
            size=fields.pop("size", "M"),
        )
        db.add(product)
        db.commit()
        return product
    return _make


@pytest.fixture
def stock_of(db):
    def _stock(code):
        db.expire_all()
        return db.query(Product).filter(Product.code == code).one().stock
    return _stock


@pytest.fixture
def cart_lines(db):
    """Current cart as {product_code: quantity}."""
    def _lines():
        db.expire_all()
        rows = db.query(CartLine).join(Product, CartLine.product_id == Product.id).all()
        return {line.product.code: line.quantity for line in rows}
    return _lines


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
