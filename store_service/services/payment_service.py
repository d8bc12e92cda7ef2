from decimal import Decimal
from typing import Iterable, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select
import logging

from ..models.payment import Payment
from ..models.payment_item import PaymentItem
from ..schemas.payment import PaymentCreate, PaymentItemCreate
from .scopes import not_deleted

logger = logging.getLogger(__name__)


def compute_total(items: Iterable[PaymentItemCreate]) -> Decimal:
    """Сумма price * qty по всем позициям, цены берутся как передал клиент"""
    return sum((item.price * item.qty for item in items), Decimal("0"))


class PaymentService:
    """Сервис для записи платежей (без обращения к платежному шлюзу)"""

    def __init__(self, db: Session):
        self.db = db

    def create_payment(self, payment_data: PaymentCreate) -> Payment:
        """
        Создает платеж вместе с позициями в одной транзакции.
        Если запись любой строки падает, откатывается все целиком.
        """
        total = compute_total(payment_data.items)

        payment = Payment(
            customer_name=payment_data.customer.name,
            customer_email=payment_data.customer.email,
            total=total,
            items=[
                PaymentItem(
                    product_id=item.product_id,
                    name=item.name,
                    price=item.price,
                    qty=item.qty
                )
                for item in payment_data.items
            ]
        )

        try:
            self.db.add(payment)
            self.db.commit()
            self.db.refresh(payment)

        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error creating payment for {payment_data.customer.email}: {e}")
            raise

        logger.info(f"💳 Payment {payment.id} recorded: {len(payment_data.items)} items, total {total}")
        return self.get_payment(payment.id)

    def get_payment(self, payment_id: int) -> Optional[Payment]:
        """Получает платеж по ID с позициями"""
        query = (
            select(Payment)
            .options(selectinload(Payment.items))
            .where(Payment.id == payment_id, not_deleted(Payment))
        )
        result = self.db.execute(query)
        return result.scalar_one_or_none()
