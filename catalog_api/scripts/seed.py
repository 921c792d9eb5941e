"""
Seed-скрипт: создание таблиц и демо-данных (категории и товары), если их ещё нет
Запуск: python -m catalog_api.scripts.seed
"""
import logging
from decimal import Decimal
from sqlmodel import Session, select
from catalog_api.db.session import engine, create_tables
from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.services.categories import find_category_by_name

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = ["Food", "Mobiles", "Electronics", "Stationery"]

DEMO_PRODUCTS = [
    {
        "name": "Cake",
        "category": "Food",
        "description": "Delicious fresh cake.",
        "price": Decimal("200.00"),
        "image_url": "https://picsum.photos/id/100/600/600",
        "total_items_in_stock": 10,
    },
    {
        "name": "Phone",
        "category": "Mobiles",
        "description": "Latest smartphone with great features.",
        "price": Decimal("20000.00"),
        "image_url": "https://picsum.photos/id/101/600/600",
        "total_items_in_stock": 100,
    },
    {
        "name": "Laptop",
        "category": "Electronics",
        "description": "High-performance laptop for professionals.",
        "price": Decimal("400000.00"),
        "image_url": "https://picsum.photos/id/102/600/600",
        "total_items_in_stock": 20,
    },
    {
        "name": "Book",
        "category": "Stationery",
        "description": "Bestselling paperback.",
        "price": Decimal("50.00"),
        "image_url": "https://picsum.photos/id/103/600/600",
        "total_items_in_stock": 3,
    },
]


def seed_categories(session: Session) -> dict:
    """Категории ищутся по имени без учёта регистра, отсутствующие создаются"""
    by_name = {}
    for name in DEMO_CATEGORIES:
        category = find_category_by_name(session, name)
        if category:
            logger.info("Category already exists: %s", category.name)
        else:
            category = Category(name=name)
            session.add(category)
            session.flush()
            logger.info("Category created: %s", name)
        by_name[name] = category
    return by_name


def seed_products(session: Session, categories: dict) -> int:
    created = 0
    for item in DEMO_PRODUCTS:
        existing = session.exec(select(Product).where(Product.name == item["name"])).first()
        if existing:
            logger.info("Product already exists: %s", existing.name)
            continue

        data = dict(item)
        category = categories[data.pop("category")]
        session.add(Product(category_id=category.id, **data))
        created += 1
        logger.info("Product created: %s", item["name"])
    return created


def seed_demo_data(bind=None) -> int:
    """Создание демо-данных; возвращает число созданных товаров"""
    bind = bind or engine
    with Session(bind) as session:
        categories = seed_categories(session)
        created = seed_products(session, categories)
        session.commit()
    return created


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("Creating tables...")
    create_tables()
    print("Seeding demo data...")
    created = seed_demo_data()
    print(f"Done! {created} products created")


if __name__ == "__main__":
    main()
