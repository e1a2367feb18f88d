"""Register, login, refresh and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import CurrentUser, get_jwt_config
from storefront.core.config import get_settings
from storefront.core.database import get_db
from storefront.core.security import JWTConfig
from storefront.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    UserOut,
)
from storefront.services import accounts

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> AuthResponse:
    """
    Create an account and return an access token, a refresh token and the user.
    Include the token in the Authorization header as: Bearer <token>
    """
    issued = accounts.register_user(db, config, body, bcrypt_rounds=get_settings().BCRYPT_ROUNDS)
    return AuthResponse(
        message="User registered successfully",
        token=issued.token,
        refresh_token=issued.refresh_token,
        user=UserOut.model_validate(issued.user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> AuthResponse:
    """Authenticate with email and password; unknown email and wrong password both return 401."""
    issued = accounts.authenticate(db, config, body.email, body.password)
    return AuthResponse(
        message="Login successful",
        token=issued.token,
        refresh_token=issued.refresh_token,
        user=UserOut.model_validate(issued.user),
    )


@router.get("/me", response_model=MeResponse)
def me(
    current_user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MeResponse:
    """Return the caller's profile, read from the database rather than the token claims."""
    user = accounts.get_profile(db, current_user.user_id)
    return MeResponse(user=UserOut.model_validate(user))


@router.post("/refresh", response_model=RefreshResponse)
def refresh(
    body: RefreshRequest,
    db: Annotated[Session, Depends(get_db)],
    config: Annotated[JWTConfig, Depends(get_jwt_config)],
) -> RefreshResponse:
    """Exchange a refresh token for a new access token and refresh token."""
    issued = accounts.refresh_tokens(db, config, body.refresh_token)
    return RefreshResponse(token=issued.token, refresh_token=issued.refresh_token)
