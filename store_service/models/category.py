from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from ..database import Base
from .base import AuditMixin


class Category(AuditMixin, Base):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False)

    # Связи
    products = relationship("Product", back_populates="category", order_by="Product.id")
