from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List
from catalog_api.schemas.category import CategoryBrief
from catalog_api.schemas.product import Money


class ProductSummary(BaseModel):
    total_products: int
    total_items_in_stock: int
    total_inventory_value: Money

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class DashboardResponse(ProductSummary):
    categories: List[CategoryBrief] = []
