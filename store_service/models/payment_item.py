from sqlalchemy import Column, String, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base
from .base import AuditMixin


class PaymentItem(AuditMixin, Base):
    __tablename__ = "payment_items"

    payment_id = Column(Integer, ForeignKey("payments.id"), nullable=False, index=True)

    # Информация о товаре (снимок на момент оплаты, без FK на products)
    product_id = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    qty = Column(Integer, nullable=False)

    # Связи
    payment = relationship("Payment", back_populates="items")
