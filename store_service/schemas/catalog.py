from pydantic import BaseModel, Field
from typing import List, Optional

from .common import AuditSchema, IdIn, Money, PriceIn


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: PriceIn
    category_id: IdIn


class ProductUpdate(BaseModel):
    """Частичное обновление: применяются только переданные поля"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[PriceIn] = None
    category_id: Optional[IdIn] = None


class ProductSummary(AuditSchema):
    name: str
    price: Money
    category_id: int


class CategorySummary(AuditSchema):
    name: str


class ProductResponse(ProductSummary):
    category: Optional[CategorySummary] = None


class CategoryProductCreate(BaseModel):
    """Товар, создаваемый вместе с категорией"""
    name: str = Field(..., min_length=1, max_length=255)
    price: PriceIn


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    products: List[CategoryProductCreate] = []


class CategoryResponse(CategorySummary):
    products: List[ProductSummary] = []
