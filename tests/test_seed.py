from decimal import Decimal

from catalog_api.scripts.seed import seed_demo_data, DEMO_PRODUCTS
from catalog_api.services.categories import list_categories
from catalog_api.services.inventory import get_summary
from catalog_api.services.products import list_products


def test_seed_demo_data(engine, db):
    created = seed_demo_data(engine)
    assert created == len(DEMO_PRODUCTS)

    assert [c.name for c in list_categories(db)] == ["Electronics", "Food", "Mobiles", "Stationery"]

    products = {p["name"]: p for p in list_products(db)}
    assert products["Cake"]["category"]["name"] == "Food"
    assert products["Laptop"]["price"] == Decimal("400000.00")

    summary = get_summary(db)
    assert summary["total_products"] == 4
    assert summary["total_items_in_stock"] == 133
    assert summary["total_inventory_value"] == Decimal("10002150.00")


def test_seed_is_idempotent(engine, db):
    seed_demo_data(engine)
    assert seed_demo_data(engine) == 0

    assert len(list_categories(db)) == 4
    assert len(list_products(db)) == 4
