"""Product catalogue: public reads, admin-only writes, soft delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import AdminUser, PageParams, Pages
from storefront.core.database import get_db
from storefront.schemas.common import Envelope, Pagination
from storefront.schemas.products import (
    ProductCategory,
    ProductFilters,
    ProductIn,
    ProductOut,
    ProductResponse,
    ProductsListResponse,
    SortField,
)
from storefront.services import catalog

router = APIRouter()


def _product_filters(
    category: ProductCategory | None = None,
    min_price: Annotated[float | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[float | None, Query(alias="maxPrice", ge=0)] = None,
    search: Annotated[str | None, Query(max_length=200)] = None,
    sort_by: Annotated[SortField | None, Query(alias="sortBy")] = None,
    sort_order: Annotated[str, Query(alias="sortOrder", pattern="^(asc|desc)$")] = "asc",
) -> ProductFilters:
    return ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )


def _list_response(products: list, pages: PageParams, total: int) -> ProductsListResponse:
    return ProductsListResponse(
        products=[ProductOut.model_validate(p) for p in products],
        pagination=Pagination.build(pages.page, pages.limit, total),
    )


@router.get("", response_model=ProductsListResponse)
def list_products(
    pages: Pages,
    filters: Annotated[ProductFilters, Depends(_product_filters)],
    db: Annotated[Session, Depends(get_db)],
) -> ProductsListResponse:
    """
    List active products with optional filters.

    - **category**: exact category
    - **minPrice** / **maxPrice**: inclusive price bounds
    - **search**: substring of name or description
    - **sortBy** / **sortOrder**: sort field and direction (default newest first)
    """
    products, total = catalog.list_products(db, filters, pages.page, pages.limit)
    return _list_response(products, pages, total)


@router.get("/category/{category}", response_model=ProductsListResponse)
def list_by_category(
    category: str,
    pages: Pages,
    db: Annotated[Session, Depends(get_db)],
) -> ProductsListResponse:
    products, total = catalog.list_by_category(db, category, pages.page, pages.limit)
    return _list_response(products, pages, total)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    product = catalog.get_product(db, product_id)
    return ProductResponse(product=ProductOut.model_validate(product))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductIn,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    product = catalog.create_product(db, body, created_by=admin.user_id)
    return ProductResponse(
        message="Product created successfully",
        product=ProductOut.model_validate(product),
    )


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    body: ProductIn,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    product = catalog.update_product(db, product_id, body)
    return ProductResponse(
        message="Product updated successfully",
        product=ProductOut.model_validate(product),
    )


@router.delete("/{product_id}", response_model=Envelope)
def delete_product(
    product_id: str,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> Envelope:
    """Soft delete: the product disappears from reads but stays in the database."""
    catalog.soft_delete_product(db, product_id)
    return Envelope(message="Product deleted successfully")
