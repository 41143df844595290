"""Dashboard summary schema."""

from decimal import Decimal

from pydantic import BaseModel, Field

from dashboard.schemas.item import ItemResponse, StatusCounts


class DashboardSummary(BaseModel):
    total_items: int
    total_stock: int
    inventory_value: Decimal = Field(..., decimal_places=2)
    category_count: int
    counts: StatusCounts
    needs_attention: list[ItemResponse]
