"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from storefront.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from storefront.schemas.common import APIModel, Envelope


def check_username_chars(username: str) -> str:
    """Usernames are letters, digits, '.', '_' and '-' only."""
    if not username.replace("_", "").replace("-", "").replace(".", "").isalnum():
        raise ValueError("Username may only contain letters, digits, '.', '_' and '-'")
    return username


class RegisterRequest(APIModel):
    """Body for POST /auth/register."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    first_name: str = Field(default="", max_length=50)
    last_name: str = Field(default="", max_length=50)

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return check_username_chars(v)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(APIModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class RefreshRequest(APIModel):
    """Body for POST /auth/refresh."""

    refresh_token: str = Field(..., min_length=1, description="Refresh token from login/register")


class AuthContext(APIModel):
    """Identity decoded from a verified access token and attached to the request."""

    user_id: str
    role: str | None = None
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class UserOut(APIModel):
    """User as returned by the API (never includes the password hash)."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime


class AuthResponse(Envelope):
    """Token pair and user returned after register or login."""

    token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="JWT refresh token (30 days)")
    user: UserOut


class RefreshResponse(Envelope):
    token: str
    refresh_token: str


class MeResponse(Envelope):
    user: UserOut
