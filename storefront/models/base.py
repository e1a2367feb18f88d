"""SQLAlchemy declarative Base and shared model configuration."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests and local runs).
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def new_id() -> str:
    """Opaque primary key for users and products."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)
