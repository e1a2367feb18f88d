"""Request/response schemas for product endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, AnyUrl, ConfigDict, Field, field_validator

from storefront.schemas.common import APIModel, Envelope, Pagination

ProductCategory = Literal["electronics", "clothing", "books", "home", "sports", "other"]
SortField = Literal["name", "price", "stock", "category", "createdAt", "updatedAt"]


class ProductImage(APIModel):
    url: AnyUrl
    alt: str = ""


class ProductIn(APIModel):
    """Body for product create and update (full replacement)."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    price: float = Field(..., ge=0)
    category: ProductCategory
    stock: int = Field(default=0, ge=0)
    images: list[ProductImage] = Field(default_factory=list)
    specifications: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, v: list[str]) -> list[str]:
        return [t.strip() for t in v if t.strip()]


class ProductCreator(APIModel):
    """Subset of the creating user shown with a product."""

    id: str
    username: str
    first_name: str
    last_name: str


class ProductOut(APIModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    stock: int
    images: list[ProductImage]
    specifications: dict[str, str]
    tags: list[str]
    is_active: bool
    created_by: ProductCreator | None = Field(
        default=None,
        validation_alias=AliasChoices("creator", "createdBy"),
        serialization_alias="createdBy",
    )
    created_at: datetime
    updated_at: datetime


class ProductFilters(APIModel):
    """Query filters for GET /products."""

    category: ProductCategory | None = None
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    search: str | None = None
    sort_by: SortField | None = None
    sort_order: Literal["asc", "desc"] = "asc"


class ProductResponse(Envelope):
    product: ProductOut


class ProductsListResponse(Envelope):
    products: list[ProductOut]
    pagination: Pagination
