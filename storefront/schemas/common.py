"""Shared schema base, response envelope and pagination."""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for API payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(APIModel):
    """Standard response envelope: {success, message?, ...payload}."""

    success: bool = True
    message: str | None = Field(default=None, description="Human readable outcome")


class Pagination(APIModel):
    """Pagination block for list endpoints."""

    current: int
    pages: int
    total: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(current=page, pages=math.ceil(total / limit) if limit else 0, total=total)
