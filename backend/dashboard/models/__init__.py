"""Domain models for the inventory dashboard."""

from dashboard.models.item import Item, ItemStatus, LOW_STOCK_THRESHOLD, status_of
from dashboard.models.display_mode import (
    DisplayPreference,
    EffectiveMode,
    PALETTES,
    PREFERENCE_CYCLE,
    PREFERENCE_LABELS,
    next_preference,
    resolve_mode,
    signal_from_prefers_dark,
)

__all__ = [
    "Item",
    "ItemStatus",
    "LOW_STOCK_THRESHOLD",
    "status_of",
    "DisplayPreference",
    "EffectiveMode",
    "PALETTES",
    "PREFERENCE_CYCLE",
    "PREFERENCE_LABELS",
    "next_preference",
    "resolve_mode",
    "signal_from_prefers_dark",
]
