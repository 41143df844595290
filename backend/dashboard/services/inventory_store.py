"""
In-memory inventory store.

Owns the item collection. Every mutation replaces whole ``Item`` objects, so
callers holding an item never see it change underneath them, and the derived
status is always consistent with stock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from dashboard.core.converters import coerce_price, coerce_stock
from dashboard.core.errors import ItemNotFoundError
from dashboard.models.item import Item, ItemStatus

logger = logging.getLogger(__name__)

SAMPLE_ITEMS: list[dict[str, Any]] = [
    {"name": "Drone Model X1", "category": "Electronics", "price": "299.99", "stock": 45},
    {"name": "Propeller Set", "category": "Parts", "price": "24.99", "stock": 120},
    {"name": "Battery Pack", "category": "Power", "price": "89.99", "stock": 30},
    {"name": "Camera Module", "category": "Electronics", "price": "199.99", "stock": 0},
    {"name": "Controller", "category": "Accessories", "price": "149.99", "stock": 25},
]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class InventoryStore:
    """
    Ordered collection of items keyed by integer id.

    Ids are ``1 + max(existing ids)``, so they only restart at 1 once the
    collection is empty. Iteration order is insertion order; ``update`` keeps
    an item in its original position.
    """

    def __init__(self, items: Iterable[Mapping[str, Any]] | None = None):
        self._items: list[Item] = []
        for fields in items or []:
            self.add(fields)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    # ── Reads ──────────────────────────────────────
    def all(self) -> list[Item]:
        return list(self._items)

    def get(self, item_id: int) -> Item:
        return self._items[self._index_of(item_id)]

    def search(self, query: str = "") -> list[Item]:
        """Case-insensitive substring match on name or category."""
        q = (query or "").lower()
        if not q:
            return list(self._items)
        return [
            item for item in self._items
            if q in item.name.lower() or q in item.category.lower()
        ]

    def count_by_status(self, status: ItemStatus | str) -> int:
        status = ItemStatus(status)
        return sum(1 for item in self._items if item.status is status)

    # ── Writes ─────────────────────────────────────
    def add(self, fields: Mapping[str, Any]) -> Item:
        item = self._build(self._next_id(), fields)
        self._items.append(item)
        logger.info("Item added: id=%s name=%r status=%s", item.id, item.name, item.status.value)
        return item

    def update(self, item_id: int, fields: Mapping[str, Any]) -> Item:
        """Replace every mutable field of an existing item. Raises ItemNotFoundError."""
        index = self._index_of(item_id)
        item = self._build(item_id, fields)
        self._items[index] = item
        logger.info("Item updated: id=%s stock=%s status=%s", item.id, item.stock, item.status.value)
        return item

    def remove(self, item_id: int) -> None:
        """Remove an item; unknown ids are ignored."""
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        if len(self._items) != before:
            logger.info("Item removed: id=%s", item_id)
        else:
            logger.debug("Remove ignored, no item with id=%s", item_id)

    def clear(self) -> None:
        count = len(self._items)
        self._items = []
        logger.info("Inventory cleared: %s items removed", count)

    # ── Internal ───────────────────────────────────
    def _next_id(self) -> int:
        return max((item.id for item in self._items), default=0) + 1

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    @staticmethod
    def _build(item_id: int, fields: Mapping[str, Any]) -> Item:
        return Item(
            id=item_id,
            name=_text(fields.get("name")),
            category=_text(fields.get("category")),
            price=coerce_price(fields.get("price")),
            stock=coerce_stock(fields.get("stock")),
        )


def seed_sample_items(store: InventoryStore) -> None:
    for fields in SAMPLE_ITEMS:
        store.add(fields)
