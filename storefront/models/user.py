"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Boolean, Column, DateTime, String

from storefront.models.base import Base, new_id, utcnow

USER_ROLES = ("user", "admin")


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. Email and username are unique at the database
    level; concurrent registrations with the same values fail on insert.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(30), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=False, default="")
    last_name = Column(String(50), nullable=False, default="")
    role = Column(String(32), nullable=False, default="user")
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
