"""ORM model for fashion products."""

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base


class Product(Base):
    """
    Fashion product identified by sku.

    sku is stored in canonical form (stripped, uppercase); see services.products.normalize_sku.
    """

    __tablename__ = "fashion"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sku = Column(String(64), nullable=False, unique=True, index=True)
    product_name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    is_available = Column(Boolean, nullable=False)
