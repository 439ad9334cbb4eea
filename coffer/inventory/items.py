"""Mini README: Ordered in-memory inventory of items.

Structure:
    * InventoryItem - dataclass describing a single carried item.
    * InventoryStore - list-backed store with add, list and index lookups.

The store keeps insertion order and is seeded with a sword and a shield so
the interface has something to show on first start.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class InventoryItem:
    """An item held in the inventory."""

    name: str
    rarity: str
    value: int

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Inventory items need a name.")
        if self.value < 0:
            raise ValueError(f"Item value cannot be negative, got {self.value}")

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "rarity": self.rarity, "value": self.value}

    def __str__(self) -> str:
        return f"{self.name} ({self.rarity}, worth {self.value})"


class InventoryStore:
    """Keep items in the order they were added."""

    def __init__(self, items: Optional[Iterable[InventoryItem]] = None) -> None:
        self._lock = threading.Lock()
        if items is None:
            items = self._build_demo_items()
        self._items: List[InventoryItem] = list(items)
        LOGGER.debug("Inventory initialised with %s items", len(self._items))

    @staticmethod
    def _build_demo_items() -> List[InventoryItem]:
        return [
            InventoryItem(name="Sword", rarity="epic", value=100),
            InventoryItem(name="Shield", rarity="common", value=35),
        ]

    def add_item(self, item: InventoryItem) -> InventoryItem:
        with self._lock:
            self._items.append(item)
            total = len(self._items)
        LOGGER.info("Added %s to inventory (%s items)", item, total)
        return item

    def list_items(self) -> List[InventoryItem]:
        """Return a snapshot of the items in insertion order."""

        with self._lock:
            return list(self._items)

    def get_item(self, index: int) -> InventoryItem:
        """Retrieve the item at ``index``, rejecting negative positions."""

        with self._lock:
            if not 0 <= index < len(self._items):
                raise IndexError(f"No inventory item at index {index}")
            return self._items[index]

    def count(self) -> int:
        with self._lock:
            return len(self._items)
