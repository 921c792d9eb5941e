from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CategoryBrief(BaseModel):
    """Категория в сводке дашборда"""
    id: int
    name: str

    class Config:
        from_attributes = True
