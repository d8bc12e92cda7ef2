from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
import logging

from ..models.cart import Cart
from ..schemas.cart import CartCreate
from .scopes import not_deleted

logger = logging.getLogger(__name__)


class CartService:
    def __init__(self, db: Session):
        self.db = db

    def list_carts(self) -> List[Cart]:
        """Получает все активные корзины"""
        query = select(Cart).where(not_deleted(Cart)).order_by(Cart.id)
        return self.db.execute(query).scalars().all()

    def create_cart(self, cart_data: CartCreate) -> Cart:
        """Сохраняет корзину как есть: сумму передает клиент"""
        try:
            cart = Cart(user_id=cart_data.user_id, cart_value=cart_data.cart_value)
            self.db.add(cart)
            self.db.commit()
            self.db.refresh(cart)
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error creating cart for user {cart_data.user_id}: {e}")
            raise

        logger.info(f"🛒 Cart {cart.id} created for user {cart.user_id}")
        return cart
