from pydantic import BaseModel, Field, PlainSerializer
from typing import Annotated, Optional
from datetime import datetime
from decimal import Decimal

from ..models.base import MAX_ID

# Денежные суммы храним как Decimal, в JSON отдаем числом
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Входящие суммы: не точнее копейки, как колонки Numeric(10, 2)
MoneyIn = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
PriceIn = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

# Входящие ссылки на записи
IdIn = Annotated[int, Field(ge=0, le=MAX_ID)]


class AuditSchema(BaseModel):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
