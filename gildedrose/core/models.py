"""Domain models for the Gilded Rose inventory.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field
from enum import Enum

MIN_QUALITY = 0
MAX_QUALITY = 50
LEGENDARY_QUALITY = 80


class ItemCategory(Enum):
    """Closed set of rule categories an item can belong to.

    The category is derived from the item name:
    - AGED_BRIE: name equals "Aged Brie"
    - LEGENDARY: name equals "Sulfuras, Hand of Ragnaros"
    - BACKSTAGE_PASS: name starts with "Backstage passes"
    - CONJURED: name starts with "Conjured"
    - ORDINARY: anything else
    """

    ORDINARY = "ordinary"
    AGED_BRIE = "aged_brie"
    LEGENDARY = "legendary"
    BACKSTAGE_PASS = "backstage_pass"
    CONJURED = "conjured"


AGED_BRIE_NAME = "Aged Brie"
LEGENDARY_NAME = "Sulfuras, Hand of Ragnaros"
BACKSTAGE_PASS_PREFIX = "Backstage passes"
CONJURED_PREFIX = "Conjured"

# Human-readable match rule per category, in lookup order.
CATEGORY_RULES: dict[ItemCategory, str] = {
    ItemCategory.AGED_BRIE: f'name equals "{AGED_BRIE_NAME}"',
    ItemCategory.LEGENDARY: f'name equals "{LEGENDARY_NAME}"',
    ItemCategory.BACKSTAGE_PASS: f'name starts with "{BACKSTAGE_PASS_PREFIX}"',
    ItemCategory.CONJURED: f'name starts with "{CONJURED_PREFIX}"',
    ItemCategory.ORDINARY: "any other name",
}


def categorize(name: str) -> ItemCategory:
    """Resolve the rule category for an item name.

    Unknown names fall through to ORDINARY.
    """
    if name == AGED_BRIE_NAME:
        return ItemCategory.AGED_BRIE
    if name == LEGENDARY_NAME:
        return ItemCategory.LEGENDARY
    if name.startswith(BACKSTAGE_PASS_PREFIX):
        return ItemCategory.BACKSTAGE_PASS
    if name.startswith(CONJURED_PREFIX):
        return ItemCategory.CONJURED
    return ItemCategory.ORDINARY


@dataclass(frozen=True)
class ItemSnapshot:
    """Immutable copy of an item's state at the end of a day."""

    name: str
    sell_in: int
    quality: int
    category: ItemCategory

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


@dataclass
class Item:
    """An inventory item.

    Mutated in place by the day updater, once per simulated day.
    The category is resolved from the name once, at construction.

    Note: This dataclass is intentionally mutable; callers keep a
    reference to their items and re-read sell_in/quality after each
    update.
    """

    name: str
    sell_in: int
    quality: int
    category: ItemCategory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate item invariants and resolve the category."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        if self.quality < MIN_QUALITY:
            raise ValueError(
                f"quality must be non-negative, got {self.quality}"
            )
        self.category = categorize(self.name)

    @property
    def is_legendary(self) -> bool:
        return self.category is ItemCategory.LEGENDARY

    def snapshot(self) -> ItemSnapshot:
        """Capture the current state as an immutable snapshot."""
        return ItemSnapshot(
            name=self.name,
            sell_in=self.sell_in,
            quality=self.quality,
            category=self.category,
        )

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


@dataclass(frozen=True)
class DayReport:
    """State of the whole inventory at the end of one simulated day.

    Day 0 is the starting inventory, before any update.
    """

    day: int
    items: tuple[ItemSnapshot, ...]  # immutable for frozen dataclass

    def __post_init__(self) -> None:
        """Validate report invariants on creation."""
        if self.day < 0:
            raise ValueError(f"day must be non-negative, got {self.day}")
