from .product_service import ProductService, CategoryMissingError
from .category_service import CategoryService
from .cart_service import CartService
from .payment_service import PaymentService

__all__ = [
    "ProductService",
    "CategoryMissingError",
    "CategoryService",
    "CartService",
    "PaymentService"
]
