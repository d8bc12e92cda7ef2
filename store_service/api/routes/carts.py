from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from ...schemas.cart import CartCreate, CartResponse
from ...services.cart_service import CartService
from ..dependencies import get_cart_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/carts", tags=["carts"])


@router.get("", response_model=List[CartResponse])
def get_carts(cart_service: CartService = Depends(get_cart_service)):
    """Список корзин"""
    try:
        return cart_service.list_carts()
    except SQLAlchemyError as e:
        logger.error(f"❌ Error listing carts: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=CartResponse, status_code=201)
def create_cart(
        cart: CartCreate,
        cart_service: CartService = Depends(get_cart_service)
):
    """Создать корзину"""
    try:
        return cart_service.create_cart(cart)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating cart: {e}")
        raise HTTPException(status_code=500, detail=str(e))
