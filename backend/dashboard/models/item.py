"""Inventory item model and its derived stock status."""

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

LOW_STOCK_THRESHOLD = 10


class ItemStatus(str, enum.Enum):
    ACTIVE = "active"
    LOW = "low"
    OUT = "out"


def status_of(stock: int) -> ItemStatus:
    """The only place stock thresholds live."""
    if stock == 0:
        return ItemStatus.OUT
    if stock < LOW_STOCK_THRESHOLD:
        return ItemStatus.LOW
    return ItemStatus.ACTIVE


class Item(BaseModel):
    """
    Immutable inventory record.

    ``status`` is computed from ``stock`` on every access, so it can never
    disagree with it. Updates produce a new ``Item`` with the same id.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str
    price: Decimal = Field(..., ge=0, decimal_places=2)
    stock: int = Field(..., ge=0)

    @computed_field
    @property
    def status(self) -> ItemStatus:
        return status_of(self.stock)

    def __repr__(self) -> str:
        return f"<Item {self.id}: {self.name} stock={self.stock} status={self.status.value}>"
