import logging
from typing import List, Optional, Tuple
from fastapi import HTTPException, status
from sqlmodel import Session, select, col
from catalog_api.models.timestamps import utc_now
from catalog_api.models.product import Product
from catalog_api.models.category import Category
from catalog_api.schemas.product import ProductRequest
from catalog_api.services.categories import build_category_response

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def name_contains_pattern(term: str) -> str:
    """LIKE-шаблон для подстроки: % и _ из запроса ищутся буквально"""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def select_products_with_category():
    """Товар и его категория одним запросом (LEFT OUTER JOIN)"""
    return select(Product, Category).outerjoin(Category, Product.category_id == Category.id)


def build_product_response(product: Product, category: Optional[Category]) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "image_url": product.image_url,
        "total_items_in_stock": product.total_items_in_stock,
        "category": build_category_response(category),
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def list_products(db: Session, q: Optional[str] = None) -> List[dict]:
    """
    Все товары с категориями.
    Если q задан и не пустой после strip, то только товары, в названии
    которых есть q (без учёта регистра). Порядок: по id.
    """
    stmt = select_products_with_category()

    term = q.strip() if q else ""
    if term:
        stmt = stmt.where(col(Product.name).ilike(name_contains_pattern(term), escape=LIKE_ESCAPE))

    stmt = stmt.order_by(Product.id.asc())
    rows = db.exec(stmt).all()
    logger.debug("Listed %d products (q=%r)", len(rows), term or None)

    return [build_product_response(product, category) for product, category in rows]


def load_product(db: Session, product_id: int) -> Tuple[Product, Optional[Category]]:
    stmt = select_products_with_category().where(Product.id == product_id)
    row = db.exec(stmt).first()

    if not row:
        logger.info("Product %s not found", product_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    return row[0], row[1]


def resolve_category(db: Session, category_id: int) -> Category:
    """Категория из запроса должна существовать, иначе 400"""
    category = db.get(Category, category_id)
    if not category:
        logger.warning("Rejected product write: category %s not found", category_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category not found")
    return category


def get_product(db: Session, product_id: int) -> dict:
    product, category = load_product(db, product_id)
    return build_product_response(product, category)


def create_product(db: Session, data: ProductRequest) -> dict:
    """Создание товара"""
    category = None
    if data.category_id is not None:
        category = resolve_category(db, data.category_id)

    product = Product(
        name=data.name,
        description=data.description,
        price=data.price,
        image_url=data.image_url,
        total_items_in_stock=data.total_items_in_stock if data.total_items_in_stock is not None else 0,
        category_id=category.id if category else None,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    if category:
        db.refresh(category)

    logger.info("Product created: id=%s name=%r", product.id, product.name)
    return build_product_response(product, category)


def update_product(db: Session, product_id: int, data: ProductRequest) -> dict:
    """
    Обновление товара.
    name/description/price/image_url перезаписываются всегда,
    остаток только если передан, категория только если передан category_id.
    """
    product, category = load_product(db, product_id)

    if data.category_id is not None:
        category = resolve_category(db, data.category_id)
        product.category_id = category.id

    product.name = data.name
    product.description = data.description
    product.price = data.price
    product.image_url = data.image_url

    if data.total_items_in_stock is not None:
        product.total_items_in_stock = data.total_items_in_stock

    product.updated_at = utc_now()
    db.add(product)
    db.commit()
    db.refresh(product)
    if category:
        db.refresh(category)

    logger.info("Product updated: id=%s", product.id)
    return build_product_response(product, category)


def delete_product(db: Session, product_id: int) -> None:
    product = db.get(Product, product_id)
    if not product:
        logger.info("Product %s not found", product_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    db.delete(product)
    db.commit()
    logger.info("Product deleted: id=%s", product_id)
