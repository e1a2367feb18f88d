"""
Insert sample products when the catalogue is empty. Run from project root:

  python -m storefront.scripts.seed ADMIN_USERNAME

The products are recorded as created by ADMIN_USERNAME, which must be an admin.
"""

import argparse
import logging
import sys

from sqlalchemy.orm import Session

from storefront.core.database import SessionLocal
from storefront.models import Product, User
from storefront.schemas.products import ProductIn

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Sample Laptop",
        "description": "High-performance laptop for development",
        "price": 1299.99,
        "category": "electronics",
        "stock": 10,
        "images": [
            {
                "url": "https://via.placeholder.com/400x300/0066cc/ffffff?text=Laptop",
                "alt": "Sample Laptop",
            }
        ],
        "specifications": {"CPU": "Intel i7", "RAM": "16GB", "Storage": "512GB SSD"},
        "tags": ["laptop", "computer", "electronics"],
    },
    {
        "name": "Programming Book",
        "description": "Learn modern web development",
        "price": 49.99,
        "category": "books",
        "stock": 25,
        "images": [
            {
                "url": "https://via.placeholder.com/400x300/009900/ffffff?text=Book",
                "alt": "Programming Book",
            }
        ],
        "specifications": {"Pages": "450", "Language": "English", "Format": "Paperback"},
        "tags": ["programming", "web development", "education"],
    },
]


def seed_products(db: Session, admin: User) -> int:
    """Insert SAMPLE_PRODUCTS if no product exists yet. Returns the number inserted."""
    if db.query(Product).count() > 0:
        logger.info("Products already present; skipping seed.")
        return 0
    for raw in SAMPLE_PRODUCTS:
        body = ProductIn.model_validate(raw)
        db.add(Product(**body.model_dump(mode="json"), created_by=admin.id))
    db.commit()
    return len(SAMPLE_PRODUCTS)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the catalogue with sample products.")
    parser.add_argument("admin_username", help="Existing admin recorded as the creator")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        admin = db.query(User).filter(User.username == args.admin_username).first()
        if admin is None or admin.role != "admin":
            logger.error("No admin user named '%s'.", args.admin_username)
            return 1
        inserted = seed_products(db, admin)
        logger.info("Seed completed: products_inserted=%s", inserted)
        return 0
    except Exception as e:
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
