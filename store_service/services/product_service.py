from typing import List, Optional
from sqlalchemy.orm import Session, selectinload, with_loader_criteria
from sqlalchemy import select
import logging

from ..models.category import Category
from ..models.product import Product
from ..schemas.catalog import ProductCreate, ProductUpdate
from .scopes import in_id_range, not_deleted

logger = logging.getLogger(__name__)


class CategoryMissingError(ValueError):
    """category_id ссылается на несуществующую категорию"""

    def __init__(self, category_id: int):
        super().__init__(f"Category {category_id} does not exist")
        self.category_id = category_id


class ProductService:
    """Сервис для работы с товарами"""

    def __init__(self, db: Session):
        self.db = db

    def _select(self, *criteria):
        return (
            select(Product)
            .options(
                selectinload(Product.category),
                with_loader_criteria(Category, not_deleted(Category))
            )
            .where(not_deleted(Product), *criteria)
            .order_by(Product.id)
        )

    def list_products(self, *criteria) -> List[Product]:
        """Получает все активные товары, дополнительные условия объединяются через AND"""
        result = self.db.execute(self._select(*criteria))
        return result.scalars().all()

    def get_product(self, product_id: int) -> Optional[Product]:
        """Получает товар по ID вместе с категорией"""
        if not in_id_range(product_id):
            return None
        result = self.db.execute(self._select(Product.id == product_id))
        return result.scalar_one_or_none()

    def _ensure_category(self, category_id: int):
        query = select(Category.id).where(Category.id == category_id, not_deleted(Category))
        if self.db.execute(query).scalar_one_or_none() is None:
            raise CategoryMissingError(category_id)

    def create_product(self, product_data: ProductCreate) -> Product:
        """Создает товар"""
        self._ensure_category(product_data.category_id)

        try:
            product = Product(
                name=product_data.name,
                price=product_data.price,
                category_id=product_data.category_id
            )

            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)

        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error creating product {product_data.name!r}: {e}")
            raise

        logger.info(f"✅ Product {product.id} created")
        return self.get_product(product.id)

    def update_product(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """Обновляет только переданные поля товара"""
        product = self.get_product(product_id)
        if not product:
            return None

        update_data = product_data.model_dump(exclude_unset=True, exclude_none=True)

        if "category_id" in update_data and update_data["category_id"] != product.category_id:
            self._ensure_category(update_data["category_id"])

        try:
            for field, value in update_data.items():
                setattr(product, field, value)

            self.db.commit()
            # Сбрасываем загруженную категорию, если поменялся category_id
            self.db.expire(product)

        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error updating product {product_id}: {e}")
            raise

        logger.info(f"✅ Product {product_id} updated: {sorted(update_data)}")
        return self.get_product(product_id)

    def delete_product(self, product_id: int) -> bool:
        """Мягкое удаление товара"""
        product = self.get_product(product_id)
        if not product:
            return False

        try:
            product.soft_delete()
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Error deleting product {product_id}: {e}")
            raise

        logger.info(f"🗑️ Product {product_id} soft-deleted")
        return True
