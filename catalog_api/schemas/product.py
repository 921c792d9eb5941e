from pydantic import BaseModel, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, Annotated
from datetime import datetime
from decimal import Decimal
from catalog_api.schemas.category import CategoryResponse


CENT = Decimal("0.01")


def money_to_str(value: Decimal) -> str:
    return str(value.quantize(CENT))


# Денежные суммы в JSON уходят точной строкой "2000.00", без float
Money = Annotated[Decimal, PlainSerializer(money_to_str, return_type=str, when_used="json")]


class ProductRequest(BaseModel):
    """Тело POST/PUT: полная замена изменяемых полей"""
    name: str = Field(max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    image_url: Optional[str] = None
    total_items_in_stock: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    image_url: Optional[str] = None
    total_items_in_stock: int
    category: Optional[CategoryResponse] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
