import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlmodel import Session, select, func
from catalog_api.models.category import Category

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> List[Category]:
    """Все категории, отсортированные по имени"""
    stmt = select(Category).order_by(Category.name.asc(), Category.id.asc())
    return list(db.exec(stmt).all())


def get_category(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if not category:
        logger.info("Category %s not found", category_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


def find_category_by_name(db: Session, name: str) -> Optional[Category]:
    """Поиск категории по имени без учёта регистра"""
    stmt = select(Category).where(func.lower(Category.name) == name.strip().lower())
    return db.exec(stmt).first()


def build_category_response(category: Optional[Category]) -> Optional[dict]:
    if category is None:
        return None

    return {
        "id": category.id,
        "name": category.name,
        "created_at": category.created_at,
        "updated_at": category.updated_at,
    }
