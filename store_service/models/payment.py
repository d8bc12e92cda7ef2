from sqlalchemy import Column, String, Numeric
from sqlalchemy.orm import relationship
from ..database import Base
from .base import AuditMixin


class Payment(AuditMixin, Base):
    __tablename__ = "payments"

    # Данные покупателя
    customer_name = Column(String(255), nullable=False)
    customer_email = Column(String(255), nullable=False)

    # Сумма на момент создания: sum(price * qty) по позициям
    total = Column(Numeric(12, 2), nullable=False)

    # Связи
    items = relationship(
        "PaymentItem",
        back_populates="payment",
        cascade="all, delete-orphan",
        order_by="PaymentItem.id"
    )
