"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; storage check for readiness.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from inventory_tracker.config import get_settings
from inventory_tracker.core.exceptions import StorageUnavailableError
from inventory_tracker.db.session import DbSession

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the storage backend answer a trivial query?"""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Readiness check failed: %s", exc)
        raise StorageUnavailableError() from exc
    return {"status": "ready"}
