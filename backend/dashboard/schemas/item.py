"""Item request/response schemas."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from dashboard.models.item import ItemStatus


class ItemFields(BaseModel):
    """
    Form payload for create and update.

    Price and stock take any JSON value: the store coerces malformed numbers
    to 0 instead of rejecting them.
    """
    name: str = ""
    category: str = ""
    price: Any = None
    stock: Any = None


class ItemResponse(BaseModel):
    id: int
    name: str
    category: str
    price: Decimal
    stock: int
    status: ItemStatus

    model_config = {"from_attributes": True}


class StatusCounts(BaseModel):
    active: int
    low: int
    out: int


class ItemListResponse(BaseModel):
    items: list[ItemResponse]
    total: int
    counts: StatusCounts
