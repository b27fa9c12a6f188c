"""
Admin endpoints - system-wide statistics (ADMIN only).
"""

from fastapi import APIRouter

from inventory_tracker.core.dependencies import CurrentActor, StatsServiceDep
from inventory_tracker.schemas.stats import AdminStats

router = APIRouter()


@router.get("/stats", response_model=AdminStats)
async def admin_stats(actor: CurrentActor, svc: StatsServiceDep):
    return await svc.admin_stats(actor)
