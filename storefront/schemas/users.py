"""Request/response schemas for user management endpoints."""

from pydantic import ConfigDict, Field, field_validator

from storefront.core.security import USERNAME_MAX_LEN, USERNAME_MIN_LEN
from storefront.schemas.auth import UserOut, check_username_chars
from storefront.schemas.common import APIModel, Envelope, Pagination


class UserUpdateRequest(APIModel):
    """Profile fields a user (or an admin) may change. Email and role are not editable."""

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    username: str | None = Field(
        default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN
    )

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        return check_username_chars(v) if v is not None else v


class UserResponse(Envelope):
    user: UserOut


class UsersListResponse(Envelope):
    """Response for GET /users (admin only)."""

    users: list[UserOut]
    pagination: Pagination


class UserStatus(APIModel):
    id: str
    username: str
    email: str
    is_active: bool


class UserStatusResponse(Envelope):
    user: UserStatus
