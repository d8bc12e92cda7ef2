from typing import List, Optional
from sqlalchemy.orm import Session, selectinload, with_loader_criteria
from sqlalchemy import select
import logging

from ..models.category import Category
from ..models.product import Product
from ..schemas.catalog import CategoryCreate
from .scopes import in_id_range, not_deleted

logger = logging.getLogger(__name__)


class CategoryService:
    """Сервис для работы с категориями"""

    def __init__(self, db: Session):
        self.db = db

    def _select(self, *criteria):
        # В категории показываем только активные товары
        return (
            select(Category)
            .options(
                selectinload(Category.products),
                with_loader_criteria(Product, not_deleted(Product))
            )
            .where(not_deleted(Category), *criteria)
            .order_by(Category.id)
        )

    def list_categories(self) -> List[Category]:
        """Получает все активные категории с товарами"""
        result = self.db.execute(self._select())
        return result.scalars().all()

    def get_category(self, category_id: int) -> Optional[Category]:
        """Получает категорию по ID с товарами"""
        if not in_id_range(category_id):
            return None
        result = self.db.execute(self._select(Category.id == category_id))
        return result.scalar_one_or_none()

    def create_category(self, category_data: CategoryCreate) -> Category:
        """Создает категорию (и вложенные товары, если переданы)"""
        try:
            category = Category(name=category_data.name)
            category.products = [
                Product(name=item.name, price=item.price)
                for item in category_data.products
            ]

            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)

        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error creating category {category_data.name!r}: {e}")
            raise

        logger.info(f"✅ Category {category.id} created with {len(category_data.products)} products")
        return self.get_category(category.id)
