"""JSON file inventory adapter.

Implements InventoryPort by reading a JSON array of item records:

    [
        {"name": "Aged Brie", "sell_in": 2, "quality": 0},
        {"name": "Conjured Mana Cake", "sellIn": 3, "quality": 6}
    ]

Records are validated with pydantic before Item objects are built.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gildedrose.core.models import Item
from gildedrose.core.ports import InventoryPort

logger = logging.getLogger(__name__)


class ItemRecord(BaseModel):
    """One item as stored in an inventory file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    sell_in: int = Field(alias="sellIn")
    quality: int = Field(ge=0)

    def to_item(self) -> Item:
        return Item(name=self.name, sell_in=self.sell_in, quality=self.quality)


class JsonFileInventoryAdapter(InventoryPort):
    """Loads the starting inventory from a JSON file."""

    def __init__(self, path: str):
        """Initialize JSON inventory adapter.

        Args:
            path: Path to the JSON inventory file. The file is read on
                every load_items() call, not here.
        """
        self.path = Path(path)

    def load_items(self) -> list[Item]:
        """Read and validate the inventory file.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid UTF-8 JSON or a record is invalid.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid encoding in inventory file {self.path}: {e}") from e
        except OSError as e:
            raise OSError(f"Failed to read inventory file {self.path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in inventory file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise ValueError(
                f"Inventory file {self.path} must contain a JSON array, "
                f"got {type(data).__name__}"
            )

        items = []
        for index, entry in enumerate(data):
            try:
                items.append(ItemRecord.model_validate(entry).to_item())
            except (ValidationError, ValueError) as e:
                raise ValueError(
                    f"Invalid item record #{index} in {self.path}: {e}"
                ) from e

        logger.info(f"Loaded {len(items)} items from {self.path}")
        return items
