"""Core domain logic for the Gilded Rose inventory.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    LEGENDARY_QUALITY,
    MAX_QUALITY,
    MIN_QUALITY,
    DayReport,
    Item,
    ItemCategory,
    ItemSnapshot,
    categorize,
)
from .updater import DayUpdater, GildedRose

__all__ = [
    "LEGENDARY_QUALITY",
    "MAX_QUALITY",
    "MIN_QUALITY",
    "DayReport",
    "DayUpdater",
    "GildedRose",
    "Item",
    "ItemCategory",
    "ItemSnapshot",
    "categorize",
]
