"""
Условия выборки товаров.

Каждая функция возвращает SQL-условие; ProductService объединяет
их через AND. Некорректные значения фильтров игнорируются.
"""
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from ..models.base import MAX_ID
from ..models.product import Product


def not_deleted(model):
    return model.deleted_at.is_(None)


def min_price(value: Decimal):
    return Product.price >= value


def category_id(value: int):
    return Product.category_id == value


def parse_min_price(raw: Optional[str]) -> Optional[Decimal]:
    if not raw:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def in_id_range(value: int) -> bool:
    return 0 <= value <= MAX_ID


def parse_category_id(raw: Optional[str]) -> Optional[int]:
    if not raw or not raw.isdigit():
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if in_id_range(value) else None


def product_filters(min_price_raw: Optional[str] = None, category_id_raw: Optional[str] = None) -> List:
    """Собирает условия для /products/filter из строк query-параметров"""
    criteria = []

    price = parse_min_price(min_price_raw)
    if price is not None:
        criteria.append(min_price(price))

    cat_id = parse_category_id(category_id_raw)
    if cat_id is not None:
        criteria.append(category_id(cat_id))

    return criteria
