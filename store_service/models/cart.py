from sqlalchemy import Column, Integer, Numeric
from ..database import Base
from .base import AuditMixin


class Cart(AuditMixin, Base):
    __tablename__ = "carts"

    user_id = Column(Integer, nullable=False, index=True)
    cart_value = Column(Numeric(10, 2), nullable=False, default=0)
