from fastapi import APIRouter
from .routes import products_router, categories_router, carts_router, payments_router

# Основной API router
api_router = APIRouter()

# Подключаем роуты
api_router.include_router(products_router)
api_router.include_router(categories_router)
api_router.include_router(carts_router)
api_router.include_router(payments_router)

__all__ = ["api_router"]
