"""User management: admin listing, owner-or-admin profile access, admin delete/toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import (
    AdminUser,
    CurrentUser,
    Pages,
    ensure_not_self,
    ensure_owner_or_admin,
)
from storefront.core.database import get_db
from storefront.schemas.auth import UserOut
from storefront.schemas.common import Envelope, Pagination
from storefront.schemas.users import (
    UserResponse,
    UsersListResponse,
    UserStatus,
    UserStatusResponse,
    UserUpdateRequest,
)
from storefront.services import users as users_service

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: AdminUser,
    pages: Pages,
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List users newest first (admin only)."""
    users, total = users_service.list_users(db, pages.page, pages.limit)
    return UsersListResponse(
        users=[UserOut.model_validate(u) for u in users],
        pagination=Pagination.build(pages.page, pages.limit, total),
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    current_user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    user = users_service.get_user(db, user_id)
    ensure_owner_or_admin(current_user, user_id)
    return UserResponse(user=UserOut.model_validate(user))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    body: UserUpdateRequest,
    current_user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Update first/last name or username. Users may only update themselves unless admin."""
    ensure_owner_or_admin(current_user, user_id)
    user = users_service.update_user(db, user_id, body)
    return UserResponse(message="User updated successfully", user=UserOut.model_validate(user))


@router.delete("/{user_id}", response_model=Envelope)
def delete_user(
    user_id: str,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> Envelope:
    """Delete a user (admin only). Admins cannot delete their own account."""
    users_service.get_user(db, user_id)
    ensure_not_self(admin, user_id, "Cannot delete your own account")
    users_service.delete_user(db, user_id)
    return Envelope(message="User deleted successfully")


@router.put("/{user_id}/toggle-status", response_model=UserStatusResponse)
def toggle_status(
    user_id: str,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserStatusResponse:
    """Activate or deactivate a user (admin only). Admins cannot change their own status."""
    users_service.get_user(db, user_id)
    ensure_not_self(admin, user_id, "Cannot change your own status")
    user = users_service.toggle_user_status(db, user_id)
    state = "activated" if user.is_active else "deactivated"
    return UserStatusResponse(
        message=f"User {state} successfully",
        user=UserStatus.model_validate(user),
    )
