from pydantic import BaseModel

from .common import AuditSchema, IdIn, Money, MoneyIn


class CartCreate(BaseModel):
    user_id: IdIn
    cart_value: MoneyIn


class CartResponse(AuditSchema):
    user_id: int
    cart_value: Money
