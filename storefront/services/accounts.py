"""Registration, login, token refresh and profile lookup."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.errors import AuthenticationError, ConflictError
from storefront.core.security import (
    REFRESH_TOKEN_TYPE,
    InvalidTokenError,
    JWTConfig,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from storefront.models import User
from storefront.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password so accounts cannot be enumerated.
INVALID_CREDENTIALS = "Invalid credentials"
ACCOUNT_DEACTIVATED = "Account is deactivated"
USER_EXISTS = "User already exists with this email or username"


@dataclass(frozen=True)
class IssuedTokens:
    """Access/refresh token pair plus the user they were issued for."""

    user: User
    token: str
    refresh_token: str


def issue_tokens(config: JWTConfig, user: User) -> IssuedTokens:
    """Mint an access token (with role and email claims) and a refresh token."""
    return IssuedTokens(
        user=user,
        token=create_access_token(config, user.id, role=user.role, email=user.email),
        refresh_token=create_refresh_token(config, user.id),
    )


def register_user(
    db: Session,
    config: JWTConfig,
    body: RegisterRequest,
    bcrypt_rounds: int = 12,
) -> IssuedTokens:
    """
    Create a user with role 'user' and return it with a fresh token pair.

    Raises ConflictError if the email or username is taken, including when a
    concurrent registration wins the race and the unique index rejects the insert.
    """
    existing = (
        db.query(User)
        .filter(or_(User.email == body.email, User.username == body.username))
        .first()
    )
    if existing is not None:
        raise ConflictError(USER_EXISTS)

    user = User(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password, rounds=bcrypt_rounds),
        first_name=body.first_name,
        last_name=body.last_name,
        role="user",
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration lost uniqueness race for username=%s", body.username)
        raise ConflictError(USER_EXISTS) from e
    db.refresh(user)
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return issue_tokens(config, user)


def authenticate(db: Session, config: JWTConfig, email: str, password: str) -> IssuedTokens:
    """Check credentials, record the login time and return a fresh token pair."""
    user = db.query(User).filter(User.email == email.lower()).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt for email=%s", email)
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not user.is_active:
        raise AuthenticationError(ACCOUNT_DEACTIVATED)

    user.last_login = datetime.now(UTC)
    db.commit()
    db.refresh(user)
    return issue_tokens(config, user)


def refresh_tokens(db: Session, config: JWTConfig, refresh_token: str) -> IssuedTokens:
    """
    Exchange a refresh token for a new access token and a new refresh token.

    Access tokens are rejected here even when otherwise valid. The user must
    still exist and be active, so deactivation stops refreshes immediately.
    """
    try:
        claims = decode_token(config, refresh_token)
    except InvalidTokenError as e:
        raise AuthenticationError(f"Invalid refresh token: {e.message.lower()}") from e
    if claims.get("type") != REFRESH_TOKEN_TYPE:
        raise AuthenticationError("Invalid refresh token")
    user_id = claims.get("userId")
    if not user_id:
        raise AuthenticationError("Invalid refresh token")
    user = get_profile(db, str(user_id))
    return issue_tokens(config, user)


def get_profile(db: Session, user_id: str) -> User:
    """Load the user fresh from the store; deleted or deactivated accounts are rejected."""
    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("User not found")
    if not user.is_active:
        raise AuthenticationError(ACCOUNT_DEACTIVATED)
    return user
