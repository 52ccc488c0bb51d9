# catalog/domain/schemas.py
from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts both spellings on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(BaseModel):
    """Body of POST /products. Fields are checked by the service, not here."""

    name: Any = None
    price: Any = 0
    category: Any = None


class Product(BaseModel):
    id: str
    name: str
    price: int | float
    category: str


class ProductOut(BaseModel):
    product: Product


class ProductListOut(BaseModel):
    products: List[Product]


class AssignmentCreate(CamelModel):
    """Body of POST /products/{id}/assign."""

    account_id: Any = None


class Assignment(CamelModel):
    id: str
    account_id: str
    product_id: str
    created_at: datetime


class Charge(BaseModel):
    """Result of debiting the account on assignment."""

    balance: int | float
    currency: str


class AssignmentOut(BaseModel):
    assignment: Assignment
    charge: Charge | None = None


class AssignmentListOut(BaseModel):
    assignments: List[Assignment]


class HealthOut(BaseModel):
    status: str = "ok"
    service: str
