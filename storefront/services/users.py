"""Admin and self-service user management."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.errors import ConflictError, NotFoundError
from storefront.models import User
from storefront.schemas.users import UserUpdateRequest

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already taken"


def list_users(db: Session, page: int, limit: int) -> tuple[list[User], int]:
    """Return one page of users (newest first) and the total count."""
    total = db.query(User).count()
    users = (
        db.query(User)
        .order_by(User.created_at.desc(), User.id)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return users, total


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_user(db: Session, user_id: str, changes: UserUpdateRequest) -> User:
    """Apply the supplied profile fields; a username already used by another user is rejected."""
    user = get_user(db, user_id)
    if changes.username is not None and changes.username != user.username:
        taken = (
            db.query(User)
            .filter(User.username == changes.username, User.id != user_id)
            .first()
        )
        if taken is not None:
            raise ConflictError(USERNAME_TAKEN)

    for field, value in changes.model_dump(exclude_none=True).items():
        setattr(user, field, value)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(USERNAME_TAKEN) from e
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: str) -> None:
    """Hard delete. Products the user created keep existing without a creator."""
    user = get_user(db, user_id)
    username = user.username
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s username=%s", user_id, username)


def toggle_user_status(db: Session, user_id: str) -> User:
    user = get_user(db, user_id)
    user.is_active = not user.is_active
    db.commit()
    db.refresh(user)
    logger.info("User id=%s is_active=%s", user.id, user.is_active)
    return user
