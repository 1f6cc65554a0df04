"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True)

    # Customer snapshot (denormalized)
    customer_name = Column(String(255), nullable=False, index=True)
    shipping_address = Column(String(500), nullable=False)
    city = Column(String(255), nullable=False)
    postal_code = Column(String(32), nullable=False)
    country = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False)

    # Relationship to line items
    line_items = relationship(
        "LineItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="LineItemModel.position",
    )


class LineItemModel(Base):
    """SQLAlchemy ORM model for order_line_items table."""

    __tablename__ = "order_line_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_pk = Column(Integer, ForeignKey("orders.pk"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    product_id = Column(String(36), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="line_items")
