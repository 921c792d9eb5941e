from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from catalog_api.api.deps import get_db
from catalog_api.schemas.category import CategoryResponse
from catalog_api.services.categories import list_categories, get_category, build_category_response

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_all_categories(db: Session = Depends(get_db)):
    """Список категорий по имени"""
    return [build_category_response(category) for category in list_categories(db)]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category_by_id(category_id: int, db: Session = Depends(get_db)):
    return build_category_response(get_category(db, category_id))
