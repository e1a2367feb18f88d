"""Product catalogue queries and admin writes."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from storefront.core.errors import NotFoundError
from storefront.models import Product
from storefront.schemas.products import ProductFilters, ProductIn

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "stock": Product.stock,
    "category": Product.category,
    "createdAt": Product.created_at,
    "updatedAt": Product.updated_at,
}


def _active(db: Session) -> Query:
    return db.query(Product).filter(Product.is_active.is_(True))


def _page(query: Query, page: int, limit: int) -> tuple[list[Product], int]:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def list_products(
    db: Session, filters: ProductFilters, page: int, limit: int
) -> tuple[list[Product], int]:
    """
    Return one page of active products and the total matching count.

    search matches name or description case-insensitively. Without sort_by the
    newest products come first.
    """
    query = _active(db)
    if filters.category:
        query = query.filter(Product.category == filters.category)
    if filters.min_price is not None:
        query = query.filter(Product.price >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(Product.price <= filters.max_price)
    if filters.search and filters.search.strip():
        pattern = f"%{filters.search.strip()}%"
        query = query.filter(
            or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
        )

    if filters.sort_by:
        column = SORT_COLUMNS[filters.sort_by]
        query = query.order_by(column.desc() if filters.sort_order == "desc" else column.asc())
    else:
        query = query.order_by(Product.created_at.desc())
    return _page(query, page, limit)


def list_by_category(
    db: Session, category: str, page: int, limit: int
) -> tuple[list[Product], int]:
    query = _active(db).filter(Product.category == category).order_by(Product.created_at.desc())
    return _page(query, page, limit)


def get_product(db: Session, product_id: str) -> Product:
    """Return an active product; soft-deleted products are reported as not found."""
    product = db.get(Product, product_id)
    if product is None or not product.is_active:
        raise NotFoundError("Product not found")
    return product


def create_product(db: Session, body: ProductIn, created_by: str) -> Product:
    product = Product(**body.model_dump(mode="json"), created_by=created_by)
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product id=%s by user id=%s", product.id, created_by)
    return product


def update_product(db: Session, product_id: str, body: ProductIn) -> Product:
    """Replace the product's editable fields. Soft-deleted products can still be updated."""
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    for field, value in body.model_dump(mode="json").items():
        setattr(product, field, value)
    db.commit()
    db.refresh(product)
    logger.info("Updated product id=%s", product.id)
    return product


def soft_delete_product(db: Session, product_id: str) -> None:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    product.is_active = False
    db.commit()
    logger.info("Deactivated product id=%s", product.id)
