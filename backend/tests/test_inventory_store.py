"""Unit tests for the in-memory InventoryStore."""

from decimal import Decimal

import pytest

from dashboard.core.errors import ItemNotFoundError
from dashboard.models.item import ItemStatus, status_of
from dashboard.services.inventory_store import InventoryStore, SAMPLE_ITEMS, seed_sample_items


def _fields(name="Widget", category="Parts", price="9.99", stock=20):
    return {"name": name, "category": category, "price": price, "stock": stock}


@pytest.fixture
def store():
    """The five sample items from the seed data."""
    s = InventoryStore()
    seed_sample_items(s)
    return s


# ── Derived status ─────────────────────────────────

def test_status_thresholds():
    assert status_of(0) is ItemStatus.OUT
    assert status_of(1) is ItemStatus.LOW
    assert status_of(9) is ItemStatus.LOW
    assert status_of(10) is ItemStatus.ACTIVE
    assert status_of(500) is ItemStatus.ACTIVE


def test_seed_statuses_are_derived_from_stock(store):
    assert [item.status for item in store] == [
        ItemStatus.ACTIVE, ItemStatus.ACTIVE, ItemStatus.ACTIVE, ItemStatus.OUT, ItemStatus.ACTIVE,
    ]


def test_status_follows_every_mutation():
    s = InventoryStore()
    item = s.add(_fields(stock=0))
    assert item.status is ItemStatus.OUT
    for stock in (3, 10, 0, 9, 11):
        item = s.update(item.id, _fields(stock=stock))
        assert item.status is status_of(stock)
        assert s.get(item.id).status is status_of(stock)


def test_items_are_immutable(store):
    item = store.get(1)
    with pytest.raises(Exception):
        item.stock = 0
    assert store.get(1).stock == 45


# ── Ids ────────────────────────────────────────────

def test_ids_strictly_increase():
    s = InventoryStore()
    ids = [s.add(_fields()).id for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_id_is_max_plus_one_after_delete(store):
    store.remove(2)
    assert store.add(_fields()).id == 6
    store.remove(6)
    store.remove(5)
    # 4 is now the highest id left
    assert store.add(_fields()).id == 5


def test_clear_then_add_restarts_ids(store):
    store.clear()
    assert len(store) == 0
    assert store.add(_fields()).id == 1


# ── Update ─────────────────────────────────────────

def test_update_scenario_low_stock(store):
    updated = store.update(3, {**SAMPLE_ITEMS[2], "stock": 5})
    assert updated.id == 3
    assert updated.status is ItemStatus.LOW
    assert store.count_by_status(ItemStatus.LOW) == 1
    assert store.count_by_status("active") == 3
    assert store.count_by_status(ItemStatus.OUT) == 1


def test_update_replaces_all_fields_in_place(store):
    store.update(2, _fields(name="Rotor", category="Spare", price="1.5", stock=7))
    assert [item.id for item in store] == [1, 2, 3, 4, 5]
    item = store.get(2)
    assert item.name == "Rotor"
    assert item.category == "Spare"
    assert item.price == Decimal("1.50")
    assert item.stock == 7


def test_update_missing_item_raises():
    s = InventoryStore()
    with pytest.raises(ItemNotFoundError) as exc_info:
        s.update(42, _fields())
    assert exc_info.value.item_id == 42
    assert len(s) == 0


def test_get_missing_item_raises(store):
    with pytest.raises(ItemNotFoundError):
        store.get(99)


# ── Remove / clear ─────────────────────────────────

def test_remove_is_idempotent(store):
    store.remove(4)
    once = store.all()
    store.remove(4)
    assert store.all() == once
    assert [item.id for item in once] == [1, 2, 3, 5]


def test_remove_unknown_id_is_noop(store):
    store.remove(1234)
    assert len(store) == 5


# ── Search ─────────────────────────────────────────

def test_empty_search_returns_everything_in_order(store):
    assert store.search("") == store.all()
    assert [item.id for item in store.search()] == [1, 2, 3, 4, 5]


def test_search_matches_name_or_category_case_insensitive(store):
    assert [item.id for item in store.search("ELECTRONICS")] == [1, 4]
    assert [item.id for item in store.search("pack")] == [3]
    assert [item.id for item in store.search("o")] == [1, 2, 3, 4, 5]
    assert store.search("nothing-matches") == []


def test_search_is_an_ordered_subsequence(store):
    everything = store.search("")
    for query in ("e", "Parts", "r", "x1"):
        result = store.search(query)
        positions = [everything.index(item) for item in result]
        assert positions == sorted(positions)


# ── Permissive input ───────────────────────────────

def test_malformed_numbers_are_coerced_to_zero():
    s = InventoryStore()
    item = s.add({"name": "Bad", "category": "X", "price": "abc", "stock": "lots"})
    assert item.price == Decimal("0.00")
    assert item.stock == 0
    assert item.status is ItemStatus.OUT


def test_missing_fields_default_to_empty():
    item = InventoryStore().add({})
    assert item.name == ""
    assert item.category == ""
    assert item.stock == 0


def test_count_by_status_rejects_unknown_status(store):
    with pytest.raises(ValueError):
        store.count_by_status("missing")
