import logging
from decimal import Decimal
from sqlmodel import Session, select, func
from catalog_api.models.product import Product
from catalog_api.services.categories import list_categories

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def get_inventory_value(db: Session) -> Decimal:
    """
    Стоимость склада: сумма price * stock в Decimal.
    SUM по NUMERIC в SQLite уходит во float, поэтому произведения
    суммируются здесь, а не в SQL.
    """
    total_value = Decimal("0")
    stmt = select(Product.price, Product.total_items_in_stock)
    for price, stock in db.exec(stmt):
        total_value += Decimal(price) * stock
    return total_value.quantize(CENT)


def get_summary(db: Session) -> dict:
    """Сводка по складу: количество товаров, сумма остатков и стоимость"""
    totals_stmt = select(
        func.count(Product.id),
        func.coalesce(func.sum(Product.total_items_in_stock), 0),
    )
    total_products, total_items = db.exec(totals_stmt).one()

    total_value = get_inventory_value(db)
    logger.debug("Summary: %d products, %d items, value %s", total_products, total_items, total_value)

    return {
        "total_products": total_products or 0,
        "total_items_in_stock": int(total_items or 0),
        "total_inventory_value": total_value,
    }


def get_dashboard(db: Session) -> dict:
    """Сводка + список категорий (id, name) для дашборда"""
    summary = get_summary(db)
    summary["categories"] = [
        {"id": category.id, "name": category.name}
        for category in list_categories(db)
    ]
    return summary
