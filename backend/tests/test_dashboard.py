"""Unit tests for the dashboard summary and CSV export."""

from decimal import Decimal

import pytest

from dashboard.schemas.auth import CurrentUser
from dashboard.services.dashboard import build_summary
from dashboard.services.export import EXPORT_COLUMNS, items_to_csv
from dashboard.services.inventory_store import InventoryStore, seed_sample_items


@pytest.fixture
def store():
    s = InventoryStore()
    seed_sample_items(s)
    return s


def test_summary_of_seed_data(store):
    summary = build_summary(store)

    assert summary.total_items == 5
    assert summary.total_stock == 220
    # 299.99*45 + 24.99*120 + 89.99*30 + 0 + 149.99*25
    assert summary.inventory_value == Decimal("22947.80")
    assert summary.category_count == 4
    assert (summary.counts.active, summary.counts.low, summary.counts.out) == (4, 0, 1)
    assert [item.name for item in summary.needs_attention] == ["Camera Module"]


def test_summary_tracks_updates(store):
    store.update(3, {"name": "Battery Pack", "category": "Power", "price": "89.99", "stock": 5})
    summary = build_summary(store)

    assert summary.counts.low == 1
    assert [item.id for item in summary.needs_attention] == [3, 4]


def test_summary_of_empty_store():
    summary = build_summary(InventoryStore())

    assert summary.total_items == 0
    assert summary.inventory_value == Decimal("0.00")
    assert summary.needs_attention == []


@pytest.mark.asyncio
async def test_summary_route(store):
    from dashboard.api.dashboard import get_summary

    result = await get_summary(current_user=CurrentUser(email="ops@example.com"), store=store)
    assert result.total_items == 5


def test_items_to_csv_empty():
    lines = items_to_csv([]).splitlines()
    assert lines == [",".join(EXPORT_COLUMNS)]


def test_items_to_csv_quotes_commas():
    store = InventoryStore([{"name": "Nuts, bolts", "category": "Parts", "price": 1, "stock": 3}])
    lines = items_to_csv(store).splitlines()
    assert lines[1] == '1,"Nuts, bolts",Parts,1.00,3,low'


def test_summary_with_large_prices():
    store = InventoryStore([{"name": "Satellite", "category": "Space", "price": "1e30", "stock": 2}])
    summary = build_summary(store)
    assert summary.inventory_value == Decimal("2000000000000000000000000000000.00")
