from sqlmodel import SQLModel, Field
from sqlalchemy import CheckConstraint
from typing import Optional
from datetime import datetime
from .timestamps import utc_now
from decimal import Decimal


class Product(SQLModel, table=True):
    """
    Товар каталога.
    Категория хранится только как category_id: связь загружается явным
    JOIN в сервисе, без ленивых relationship-атрибутов.
    """
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("total_items_in_stock >= 0", name="ck_products_stock_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    description: Optional[str] = None

    price: Decimal = Field(max_digits=15, decimal_places=2)
    image_url: Optional[str] = None
    total_items_in_stock: int = Field(default=0)

    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
