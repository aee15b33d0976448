"""Built-in fixture inventory.

Implements InventoryPort with the canonical shop contents used for
the day-by-day approval run.
"""

from gildedrose.core.models import Item
from gildedrose.core.ports import InventoryPort

# (name, sell_in, quality)
FIXTURE_ITEMS: tuple[tuple[str, int, int], ...] = (
    ("+5 Dexterity Vest", 10, 20),
    ("Aged Brie", 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    ("Sulfuras, Hand of Ragnaros", 0, 80),
    ("Sulfuras, Hand of Ragnaros", -1, 80),
    ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
    ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
    ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
    ("Conjured Mana Cake", 3, 6),
)


class FixtureInventoryAdapter(InventoryPort):
    """Serves fresh copies of the fixture items on every load."""

    def load_items(self) -> list[Item]:
        return [
            Item(name=name, sell_in=sell_in, quality=quality)
            for name, sell_in, quality in FIXTURE_ITEMS
        ]
