"""ORM model for catalogue products."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from storefront.models.base import Base, JSONType, new_id, utcnow

PRODUCT_CATEGORIES = ("electronics", "clothing", "books", "home", "sports", "other")


class Product(Base):
    """
    Catalogue product. Deleting a product only clears is_active.

    created_by references the admin who created it; deleting that user keeps
    the product and nulls the reference.
    """

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False, index=True)
    category = Column(String(32), nullable=False, index=True)
    stock = Column(Integer, nullable=False, default=0)
    images = Column(JSONType, nullable=False, default=list)
    specifications = Column(JSONType, nullable=False, default=dict)
    tags = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_by = Column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    creator = relationship("User", lazy="joined")
