"""Admin statistics response."""

from inventory_tracker.schemas.item import CamelModel


class AdminStats(CamelModel):
    total_users: int
    total_items: int
    total_value: float
    system_health: str = "Healthy"
