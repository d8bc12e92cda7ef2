from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from ...schemas.catalog import CategoryCreate, CategoryResponse
from ...services.category_service import CategoryService
from ..dependencies import get_category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def get_categories(category_service: CategoryService = Depends(get_category_service)):
    """Список категорий с товарами"""
    try:
        return category_service.list_categories()
    except SQLAlchemyError as e:
        logger.error(f"❌ Error listing categories: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
        category_id: int,
        category_service: CategoryService = Depends(get_category_service)
):
    """Получить категорию по ID"""
    try:
        category = category_service.get_category(category_id)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error getting category {category_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
        category: CategoryCreate,
        category_service: CategoryService = Depends(get_category_service)
):
    """Создать категорию"""
    try:
        return category_service.create_category(category)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating category: {e}")
        raise HTTPException(status_code=500, detail=str(e))
