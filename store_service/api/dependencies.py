from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.product_service import ProductService
from ..services.category_service import CategoryService
from ..services.cart_service import CartService
from ..services.payment_service import PaymentService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency для получения ProductService"""
    return ProductService(db)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    """Dependency для получения CategoryService"""
    return CategoryService(db)


def get_cart_service(db: Session = Depends(get_db)) -> CartService:
    """Dependency для получения CartService"""
    return CartService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    """Dependency для получения PaymentService"""
    return PaymentService(db)
