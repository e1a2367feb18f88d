"""Request dependencies: token config, authentication gate, role and ownership gates."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Query, Request

from storefront.core.config import get_settings
from storefront.core.errors import AuthenticationError, AuthorizationError, ValidationError
from storefront.core.security import (
    REFRESH_TOKEN_TYPE,
    InvalidTokenError,
    JWTConfig,
    decode_token,
    extract_bearer_token,
)
from storefront.schemas.auth import AuthContext

MAX_PAGE_SIZE = 100
# Keeps (page - 1) * limit well inside a 64-bit OFFSET.
MAX_PAGE = 1_000_000


@lru_cache
def get_jwt_config() -> JWTConfig:
    """Token settings built once from the process settings."""
    return JWTConfig.from_settings(get_settings())


def get_current_user(
    request: Request,
    config: Annotated[JWTConfig, Depends(get_jwt_config)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthContext:
    """
    Dependency: require a valid Bearer access token and return the caller's identity.

    Raises 401 when the header is missing or malformed, the token fails
    verification, or a refresh token is presented. The identity is also stored
    on request.state.user.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("No token provided, authorization denied")
    try:
        claims = decode_token(config, token)
    except InvalidTokenError as e:
        raise AuthenticationError(e.message) from e
    if claims.get("type") == REFRESH_TOKEN_TYPE:
        raise AuthenticationError("Invalid token")
    user_id = claims.get("userId")
    if not user_id:
        raise AuthenticationError("Invalid token payload")

    ctx = AuthContext(user_id=str(user_id), role=claims.get("role"), email=claims.get("email"))
    request.state.user = ctx
    return ctx


def require_admin(
    current_user: Annotated[AuthContext, Depends(get_current_user)],
) -> AuthContext:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise AuthorizationError("Access denied. Admin privileges required.")
    return current_user


def ensure_owner_or_admin(current_user: AuthContext, target_id: str) -> None:
    """Allow acting on target_id only for that user or an admin."""
    if current_user.user_id != target_id and not current_user.is_admin:
        raise AuthorizationError("Access denied")


def ensure_not_self(current_user: AuthContext, target_id: str, message: str) -> None:
    """Stop admins from deleting or deactivating their own account."""
    if current_user.user_id == target_id:
        raise ValidationError(message)


class PageParams:
    """page/limit query parameters shared by list endpoints."""

    def __init__(
        self,
        page: Annotated[int, Query(ge=1, le=MAX_PAGE)] = 1,
        limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = 10,
    ) -> None:
        self.page = page
        self.limit = limit


CurrentUser = Annotated[AuthContext, Depends(get_current_user)]
AdminUser = Annotated[AuthContext, Depends(require_admin)]
Pages = Annotated[PageParams, Depends()]
