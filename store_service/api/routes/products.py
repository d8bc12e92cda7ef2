from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging

from ...schemas.catalog import ProductCreate, ProductUpdate, ProductResponse
from ...services.product_service import ProductService, CategoryMissingError
from ...services.scopes import product_filters
from ..dependencies import get_product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

PRODUCT_NOT_FOUND = "Product not found"


@router.get("", response_model=List[ProductResponse])
def get_products(product_service: ProductService = Depends(get_product_service)):
    """Список всех товаров с категориями"""
    try:
        return product_service.list_products()
    except SQLAlchemyError as e:
        logger.error(f"❌ Error listing products: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# Объявлен до /{product_id}, иначе "filter" уйдет в параметр пути
@router.get("/filter", response_model=List[ProductResponse])
def filter_products(
        min_price: Optional[str] = Query(None, alias="minPrice", description="Минимальная цена"),
        category_id: Optional[str] = Query(None, alias="categoryID", description="ID категории"),
        product_service: ProductService = Depends(get_product_service)
):
    """Фильтр товаров; некорректные значения параметров игнорируются"""
    try:
        return product_service.list_products(*product_filters(min_price, category_id))
    except SQLAlchemyError as e:
        logger.error(f"❌ Error filtering products: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
        product_id: int,
        product_service: ProductService = Depends(get_product_service)
):
    """Получить товар по ID"""
    try:
        product = product_service.get_product(product_id)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error getting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not product:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return product


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
        product: ProductCreate,
        product_service: ProductService = Depends(get_product_service)
):
    """Создать товар"""
    try:
        return product_service.create_product(product)
    except CategoryMissingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating product: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
        product_id: int,
        product: ProductUpdate,
        product_service: ProductService = Depends(get_product_service)
):
    """Обновить переданные поля товара"""
    try:
        updated = product_service.update_product(product_id, product)
    except CategoryMissingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"❌ Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not updated:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return updated


@router.delete("/{product_id}", status_code=204)
def delete_product(
        product_id: int,
        product_service: ProductService = Depends(get_product_service)
):
    """Мягкое удаление товара"""
    try:
        deleted = product_service.delete_product(product_id)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return Response(status_code=204)
