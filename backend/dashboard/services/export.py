"""CSV export of the item table."""

from collections.abc import Iterable

import pandas as pd

from dashboard.models.item import Item

EXPORT_COLUMNS = ["id", "name", "category", "price", "stock", "status"]


def items_to_csv(items: Iterable[Item]) -> str:
    rows = [
        {
            "id": item.id,
            "name": item.name,
            "category": item.category,
            "price": f"{item.price:.2f}",
            "stock": item.stock,
            "status": item.status.value,
        }
        for item in items
    ]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
