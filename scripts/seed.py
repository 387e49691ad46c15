"""
Marketplace - Catalog Seeder
==============================
Seeds categories and sample products. Catalog management has no HTTP
surface, so this is how a fresh database gets something to sell.

Usage:
    python scripts/seed.py          # Seed (skips existing codes)
    python scripts/seed.py --reset  # Drop all data and reseed
"""

import sys
import os
from decimal import Decimal

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.database import SessionLocal, Base, engine
from modules.catalog.models import Category, Product
from modules.cart.models import Cart, CartLine  # noqa


CATEGORIES = [
    {"code": "SHIRT", "name": "Shirts"},
    {"code": "PANTS", "name": "Pants"},
    {"code": "SHOES", "name": "Shoes"},
]

PRODUCTS = [
    {"code": "SH001", "name": "Basic T-Shirt", "description": "Cotton crew neck t-shirt",
     "category": "SHIRT", "price": "19.90", "stock": 50, "color": "White", "size": "M"},
    {"code": "SH002", "name": "Oxford Shirt", "description": "Long sleeve oxford shirt",
     "category": "SHIRT", "price": "39.90", "stock": 20, "color": "Blue", "size": "L"},
    {"code": "PA001", "name": "Slim Jeans", "description": "Stretch denim slim fit",
     "category": "PANTS", "price": "49.90", "stock": 30, "color": "Indigo", "size": "32"},
    {"code": "PA002", "name": "Chino", "description": "Twill chino trousers",
     "category": "PANTS", "price": "44.50", "stock": 15, "color": "Beige", "size": "34"},
    {"code": "SO001", "name": "Runner", "description": "Lightweight running shoe",
     "category": "SHOES", "price": "89.00", "stock": 10, "color": "Black", "size": "42"},
]


def ensure_tables():
    """Create all tables if they don't exist (safe to call multiple times)."""
    print("[0/2] Ensuring all tables exist...")
    Base.metadata.create_all(bind=engine)
    print("  + All tables OK\n")


def seed():
    db = SessionLocal()
    try:
        print("=" * 50)
        print("  Marketplace - Catalog Seeder")
        print("=" * 50)

        ensure_tables()

        # ==========================================
        # 1. Categories
        # ==========================================
        print("[1/2] Categories")
        categories = {}
        for data in CATEGORIES:
            existing = db.query(Category).filter(Category.code == data["code"]).first()
            if not existing:
                existing = Category(**data)
                db.add(existing)
                print(f"  + {data['code']}: {data['name']}")
            else:
                print(f"  = exists: {data['code']}")
            categories[data["code"]] = existing
        db.flush()

        # ==========================================
        # 2. Products
        # ==========================================
        print("\n[2/2] Products")
        for data in PRODUCTS:
            if db.query(Product).filter(Product.code == data["code"]).first():
                print(f"  = exists: {data['code']}")
                continue
            fields = dict(data)
            category = categories[fields.pop("category")]
            fields["price"] = Decimal(fields["price"])
            db.add(Product(category_id=category.id, **fields))
            print(f"  + {data['code']}: {data['name']} (stock {data['stock']})")

        db.commit()
        print("\nSeed complete.")

    except Exception as e:
        db.rollback()
        print(f"\nSeed failed: {e}")
        import traceback
        traceback.print_exc()
        raise
    finally:
        db.close()


def reset_and_seed():
    """Drop all tables and recreate + seed."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables recreated")
    seed()


if __name__ == "__main__":
    if "--reset" in sys.argv:
        confirm = input("This will DELETE ALL DATA. Type 'yes' to confirm: ")
        if confirm.strip().lower() == "yes":
            reset_and_seed()
        else:
            print("Aborted.")
    else:
        seed()
