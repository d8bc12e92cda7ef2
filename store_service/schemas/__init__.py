from .catalog import (
    ProductCreate,
    ProductUpdate,
    ProductSummary,
    ProductResponse,
    CategoryCreate,
    CategoryProductCreate,
    CategorySummary,
    CategoryResponse
)
from .cart import CartCreate, CartResponse
from .payment import (
    CustomerIn,
    PaymentItemCreate,
    PaymentCreate,
    PaymentItemResponse,
    PaymentResponse,
    PaymentCreatedResponse
)

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductSummary",
    "ProductResponse",
    "CategoryCreate",
    "CategoryProductCreate",
    "CategorySummary",
    "CategoryResponse",
    "CartCreate",
    "CartResponse",
    "CustomerIn",
    "PaymentItemCreate",
    "PaymentCreate",
    "PaymentItemResponse",
    "PaymentResponse",
    "PaymentCreatedResponse"
]
