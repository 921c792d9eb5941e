from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session
from typing import Optional, List
from catalog_api.api.deps import get_db
from catalog_api.schemas.product import ProductRequest, ProductResponse
from catalog_api.schemas.dashboard import ProductSummary
from catalog_api.services.products import (
    list_products, get_product, create_product, update_product, delete_product
)
from catalog_api.services.inventory import get_summary

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductResponse])
def list_all_products(
    q: Optional[str] = Query(None, description="Search by name"),
    db: Session = Depends(get_db)
):
    """Список товаров с категориями, опционально поиск по названию"""
    return list_products(db, q)


# Объявлен до /{product_id}, иначе "summary" попадёт в product_id
@router.get("/summary", response_model=ProductSummary)
def get_inventory_summary(db: Session = Depends(get_db)):
    """Итоги склада: товары, остатки, стоимость"""
    return get_summary(db)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product_by_id(product_id: int, db: Session = Depends(get_db)):
    return get_product(db, product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_new_product(data: ProductRequest, db: Session = Depends(get_db)):
    return create_product(db, data)


@router.put("/{product_id}", response_model=ProductResponse)
def replace_product(product_id: int, data: ProductRequest, db: Session = Depends(get_db)):
    return update_product(db, product_id, data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def remove_product(product_id: int, db: Session = Depends(get_db)):
    delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
