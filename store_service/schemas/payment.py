from pydantic import BaseModel, Field
from typing import List

from ..models.base import MAX_ID
from .common import AuditSchema, IdIn, Money, PriceIn


class CustomerIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)


class PaymentItemCreate(BaseModel):
    product_id: IdIn
    name: str = Field(..., max_length=255)
    price: PriceIn
    qty: int = Field(..., ge=1, le=MAX_ID)


class PaymentCreate(BaseModel):
    customer: CustomerIn
    items: List[PaymentItemCreate] = Field(..., min_length=1)


class PaymentItemResponse(AuditSchema):
    product_id: int
    name: str
    price: Money
    qty: int


class PaymentResponse(AuditSchema):
    customer_name: str
    customer_email: str
    total: Money
    items: List[PaymentItemResponse] = []


class PaymentCreatedResponse(BaseModel):
    message: str
    payment: PaymentResponse
