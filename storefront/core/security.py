"""Password hashing and JWT creation/verification for authentication."""

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from storefront.core.durations import parse_duration

if TYPE_CHECKING:
    from storefront.core.config import Settings

# Refresh tokens always live for 30 days regardless of JWT_EXPIRE.
REFRESH_TOKEN_TTL = timedelta(days=30)
DEFAULT_ACCESS_TOKEN_TTL = "7d"
REFRESH_TOKEN_TYPE = "refresh"

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 30
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class InvalidTokenError(Exception):
    """Token failed verification (bad signature, wrong issuer/audience, malformed)."""

    def __init__(self, message: str = "Invalid token") -> None:
        self.message = message
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Token was valid but its exp claim has passed."""

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class JWTConfig:
    """Immutable token settings shared by the issuer and the verifier."""

    secret: str
    issuer: str
    audience: str
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(days=7)
    refresh_ttl: timedelta = REFRESH_TOKEN_TTL

    @classmethod
    def from_settings(cls, settings: "Settings") -> "JWTConfig":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            issuer=settings.APP_NAME,
            audience=settings.JWT_AUDIENCE,
            algorithm=settings.JWT_ALGORITHM,
            access_ttl=parse_duration(settings.JWT_EXPIRE or DEFAULT_ACCESS_TOKEN_TTL),
        )


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _sign(config: JWTConfig, payload: dict[str, Any], ttl: timedelta) -> str:
    now = datetime.now(UTC)
    claims = {
        **payload,
        "iat": now,
        "exp": now + ttl,
        "iss": config.issuer,
        "aud": config.audience,
    }
    return jwt.encode(claims, config.secret, algorithm=config.algorithm)


def create_access_token(
    config: JWTConfig,
    user_id: str,
    *,
    role: str | None = None,
    email: str | None = None,
    expires_in: str | int | timedelta | None = None,
) -> str:
    """
    Create a signed access token carrying userId and, when given, role and email.

    expires_in overrides the configured lifetime (e.g. "1h", 3600, timedelta).
    """
    if not user_id or not str(user_id).strip():
        raise ValueError("user_id must be non-empty")
    payload: dict[str, Any] = {"userId": str(user_id)}
    if role:
        payload["role"] = role
    if email:
        payload["email"] = email
    ttl = parse_duration(expires_in) if expires_in is not None else config.access_ttl
    return _sign(config, payload, ttl)


def create_refresh_token(config: JWTConfig, user_id: str) -> str:
    """Create a 30-day refresh token tagged with type=refresh. No custom claims."""
    if not user_id or not str(user_id).strip():
        raise ValueError("user_id must be non-empty")
    return _sign(
        config,
        {"userId": str(user_id), "type": REFRESH_TOKEN_TYPE},
        config.refresh_ttl,
    )


def decode_token(config: JWTConfig, token: str) -> dict[str, Any]:
    """
    Verify signature, issuer, audience and expiry; return the claims.

    Raises TokenExpiredError when exp has passed, InvalidTokenError for
    anything else wrong with the token.
    """
    try:
        return jwt.decode(
            token,
            config.secret,
            algorithms=[config.algorithm],
            audience=config.audience,
            issuer=config.issuer,
            options={"require": ["exp", "iss", "aud"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e


def is_token_expired(token: str) -> bool:
    """
    Report whether the token's exp claim has passed, without checking the signature.

    Not a substitute for decode_token; tokens without a readable exp count as expired.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return True
    try:
        exp = float(claims["exp"])
    except (KeyError, TypeError, ValueError):
        return True
    return exp <= time.time()


def extract_bearer_token(header_value: str | None) -> str | None:
    """Return the token from an 'Authorization: Bearer <token>' value, else None."""
    if not header_value:
        return None
    parts = header_value.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]
