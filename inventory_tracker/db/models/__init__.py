from inventory_tracker.db.models.item import InventoryItem
from inventory_tracker.db.models.user import User

__all__ = ["User", "InventoryItem"]
