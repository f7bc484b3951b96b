"""SQLAlchemy ORM models for products and their dependent child rows."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_admin.infrastructure.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductModel(Base):
    """ORM model — maps to the 'products' table.

    Rows are created by the storefront's catalog tooling; this service only
    updates the pricing columns.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    base_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    compare_at_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    price_calculation_method: Mapped[str] = mapped_column(
        String(50), nullable=False, default="per_piece"
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, slug='{self.slug}')>"


class PriceTierModel(Base):
    """ORM model — maps to the 'price_tiers' table."""

    __tablename__ = "price_tiers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    product_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )
    min_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    max_quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    discount_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    price_per_unit: Mapped[float] = mapped_column(Float, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_price_tiers_product", "product_id"),)

    def __repr__(self) -> str:
        return (
            f"<PriceTierModel(id={self.id}, product={self.product_id}, "
            f"min={self.min_quantity})>"
        )


class ProductSpecificationModel(Base):
    """ORM model — maps to the 'product_specifications' table."""

    __tablename__ = "product_specifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    product_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )
    spec_key: Mapped[str] = mapped_column(String(100), nullable=False)
    spec_label: Mapped[str] = mapped_column(String(255), nullable=False)
    spec_value: Mapped[str] = mapped_column(Text, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_product_specifications_product", "product_id"),)

    def __repr__(self) -> str:
        return f"<ProductSpecificationModel(id={self.id}, key='{self.spec_key}')>"
