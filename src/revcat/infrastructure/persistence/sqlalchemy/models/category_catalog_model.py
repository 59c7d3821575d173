"""SQLAlchemy model for CategoryCatalogEntry entity."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from revcat.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class CategoryCatalogModel(Base, TimestampMixin):
    """
    Product category catalog.

    Rows without customer_id are global and visible to every customer.
    """

    __tablename__ = "product_category_catalog"

    __table_args__ = (
        UniqueConstraint(
            "customer_id",
            "category_name",
            name="uq_catalog_customer_category",
        ),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)
    customer_id: Mapped[Optional[UUID]] = mapped_column(Uuid, index=True)
    category_name: Mapped[str] = mapped_column(String(255), nullable=False)
    pob_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    version: Mapped[int] = mapped_column(Integer, default=1)

    def __repr__(self) -> str:
        return (
            f"<CategoryCatalogModel(id={self.id}, "
            f"category_name={self.category_name}, customer_id={self.customer_id})>"
        )
