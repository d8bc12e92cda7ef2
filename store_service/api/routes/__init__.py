from .products import router as products_router
from .categories import router as categories_router
from .carts import router as carts_router
from .payments import router as payments_router

__all__ = [
    "products_router",
    "categories_router",
    "carts_router",
    "payments_router"
]
