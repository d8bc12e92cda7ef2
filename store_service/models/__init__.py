from .category import Category
from .product import Product
from .cart import Cart
from .payment import Payment
from .payment_item import PaymentItem

__all__ = [
    "Category",
    "Product",
    "Cart",
    "Payment",
    "PaymentItem"
]
