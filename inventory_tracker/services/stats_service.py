"""
Admin statistics - system-wide counts and inventory value.
"""

from inventory_tracker.core.exceptions import ForbiddenError
from inventory_tracker.core.policy import is_admin
from inventory_tracker.db.repositories.item_repository import ItemRepository
from inventory_tracker.db.repositories.user_repository import UserRepository
from inventory_tracker.schemas.stats import AdminStats
from inventory_tracker.schemas.user import Identity


class StatsService:
    def __init__(self, item_repo: ItemRepository, user_repo: UserRepository):
        self.item_repo = item_repo
        self.user_repo = user_repo

    async def admin_stats(self, actor: Identity) -> AdminStats:
        """Count users and items, sum quantity x price over every item. ADMIN only."""
        if not is_admin(actor.role):
            raise ForbiddenError("Admin access required")
        total_value = await self.item_repo.total_value()
        return AdminStats(
            total_users=await self.user_repo.count(),
            total_items=await self.item_repo.count(),
            total_value=round(float(total_value), 2),
            system_health="Healthy",
        )
