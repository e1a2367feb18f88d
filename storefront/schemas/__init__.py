"""Pydantic request/response schemas."""

from storefront.schemas.auth import (
    AuthContext,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    UserOut,
)
from storefront.schemas.common import APIModel, Envelope, Pagination
from storefront.schemas.health import HealthResponse
from storefront.schemas.products import (
    ProductFilters,
    ProductIn,
    ProductOut,
    ProductResponse,
    ProductsListResponse,
)
from storefront.schemas.users import (
    UserResponse,
    UsersListResponse,
    UserStatusResponse,
    UserUpdateRequest,
)

__all__ = [
    "APIModel",
    "AuthContext",
    "AuthResponse",
    "Envelope",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "Pagination",
    "ProductFilters",
    "ProductIn",
    "ProductOut",
    "ProductResponse",
    "ProductsListResponse",
    "RefreshRequest",
    "RefreshResponse",
    "RegisterRequest",
    "UserOut",
    "UserResponse",
    "UsersListResponse",
    "UserStatusResponse",
    "UserUpdateRequest",
]
