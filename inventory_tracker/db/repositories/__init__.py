# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from inventory_tracker.db.repositories.item_repository import ItemRepository
from inventory_tracker.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ItemRepository"]
