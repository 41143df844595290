"""Summary statistics for the dashboard page, derived from the store."""

from decimal import Decimal

from dashboard.core.converters import to_cents
from dashboard.models.item import ItemStatus
from dashboard.schemas.dashboard import DashboardSummary
from dashboard.schemas.item import ItemResponse, StatusCounts
from dashboard.services.inventory_store import InventoryStore


def status_counts(store: InventoryStore) -> StatusCounts:
    return StatusCounts(
        active=store.count_by_status(ItemStatus.ACTIVE),
        low=store.count_by_status(ItemStatus.LOW),
        out=store.count_by_status(ItemStatus.OUT),
    )


def build_summary(store: InventoryStore) -> DashboardSummary:
    items = store.all()
    value = sum((item.price * item.stock for item in items), Decimal("0"))
    return DashboardSummary(
        total_items=len(items),
        total_stock=sum(item.stock for item in items),
        inventory_value=to_cents(value),
        category_count=len({item.category for item in items if item.category}),
        counts=status_counts(store),
        needs_attention=[
            ItemResponse.model_validate(item)
            for item in items
            if item.status is not ItemStatus.ACTIVE
        ],
    )
