"""Day update rules for inventory items.

This module implements the business rules that advance every item in
the inventory by exactly one day: sell_in goes down, quality moves
according to the item's category, and quality stays within bounds.
"""

import logging
from collections.abc import Sequence

from .models import MAX_QUALITY, MIN_QUALITY, Item, ItemCategory

logger = logging.getLogger(__name__)

BACKSTAGE_FIRST_THRESHOLD = 10
BACKSTAGE_SECOND_THRESHOLD = 5


class DayUpdater:
    """Advances items by one simulated day.

    Pure rule logic: the only side effect is mutating the items passed
    in. Holds no state between calls.
    """

    def __init__(self, conjured_decay_rate: int = 2):
        if conjured_decay_rate < 1:
            raise ValueError(
                f"conjured_decay_rate must be >= 1, got {conjured_decay_rate}"
            )
        self.conjured_decay_rate = conjured_decay_rate

    def advance_one_day(self, items: Sequence[Item]) -> Sequence[Item]:
        """Apply one day of ageing to every item, in place.

        Returns the same sequence for convenience. Calling again
        advances a further day.
        """
        for item in items:
            self.update_item(item)
        return items

    def update_item(self, item: Item) -> None:
        """Apply one day of ageing to a single item.

        Order matters:
        1. Legendary items never change
        2. Quality adjusts using the pre-decrement sell_in
        3. sell_in decreases by one
        4. Past the sell date (sell_in < 0), quality is corrected again
        """
        category = item.category
        if category is ItemCategory.LEGENDARY:
            return

        if category is ItemCategory.AGED_BRIE:
            self._increase(item)
        elif category is ItemCategory.BACKSTAGE_PASS:
            self._increase(item)
            if item.sell_in <= BACKSTAGE_FIRST_THRESHOLD:
                self._increase(item)
            if item.sell_in <= BACKSTAGE_SECOND_THRESHOLD:
                self._increase(item)
        elif category is ItemCategory.CONJURED:
            self._decrease(item, self.conjured_decay_rate)
        else:
            self._decrease(item)

        item.sell_in -= 1

        if item.sell_in < 0:
            if category is ItemCategory.AGED_BRIE:
                self._increase(item)
            elif category is ItemCategory.BACKSTAGE_PASS:
                # Worthless after the concert
                item.quality = MIN_QUALITY
            elif category is ItemCategory.CONJURED:
                self._decrease(item, self.conjured_decay_rate)
            else:
                self._decrease(item)

        logger.debug(
            f"Updated {item.name!r} ({category.value}): "
            f"sell_in={item.sell_in}, quality={item.quality}"
        )

    @staticmethod
    def _increase(item: Item, amount: int = 1) -> None:
        """Raise quality one unit at a time, never past the ceiling.

        A value already above the ceiling is left as it is.
        """
        for _ in range(amount):
            if item.quality < MAX_QUALITY:
                item.quality += 1

    @staticmethod
    def _decrease(item: Item, amount: int = 1) -> None:
        """Lower quality one unit at a time, never below the floor."""
        for _ in range(amount):
            if item.quality > MIN_QUALITY:
                item.quality -= 1


class GildedRose:
    """The shop: owns a list of items and ages them once per call."""

    def __init__(self, items: list[Item], updater: DayUpdater | None = None):
        self.items = items
        self.updater = updater or DayUpdater()

    def update_quality(self) -> None:
        """Advance every item in the shop by one day."""
        self.updater.advance_one_day(self.items)
