"""Mini README: Inventory storage for Coffer.

Exports the item dataclass and the ordered in-memory store used by the web
interface.
"""

from .items import InventoryItem, InventoryStore

__all__ = ["InventoryItem", "InventoryStore"]
