"""
Inventory item repository - item data access and query optimization (SOLID: Single Responsibility).
Challenge: Owner-scoped queries, single-statement conditional writes, SKU uniqueness.
"""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import case, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from inventory_tracker.core.exceptions import DuplicateSKUError
from inventory_tracker.db.base import utcnow
from inventory_tracker.db.models.item import InventoryItem
from inventory_tracker.db.repositories.base_repository import BaseRepository
from inventory_tracker.schemas.item import StockLevel

logger = logging.getLogger(__name__)


def _is_sku_violation(exc: IntegrityError) -> bool:
    return "sku" in str(exc.orig).lower()


class ItemRepository(BaseRepository[InventoryItem]):
    """Item-specific queries. Uses selectinload to avoid N+1 when loading owner."""

    def __init__(self, session):
        super().__init__(session, InventoryItem)

    def _scoped(self, stmt, owner_id: str | None):
        if owner_id is None:
            return stmt
        return stmt.where(InventoryItem.owner_id == owner_id)

    async def get_by_id_with_owner(self, id: str, *, refresh: bool = False) -> InventoryItem | None:
        """Fetch item with owner in one query (solves N+1 problem)."""
        stmt = select(InventoryItem).where(InventoryItem.id == id).options(selectinload(InventoryItem.owner))
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_sku(self, sku: str) -> InventoryItem | None:
        result = await self.session.execute(select(InventoryItem).where(InventoryItem.sku == sku))
        return result.scalar_one_or_none()

    async def list_with_owner(
        self,
        *,
        owner_id: str | None = None,
        search: str | None = None,
        category: str | None = None,
        stock: StockLevel | None = None,
        low_stock_threshold: int = 10,
    ) -> list[InventoryItem]:
        """Most recent first, unpaginated. owner_id=None means every owner."""
        stmt = self._scoped(select(InventoryItem), owner_id)
        if search:
            stmt = stmt.where(
                or_(
                    InventoryItem.name.icontains(search, autoescape=True),
                    InventoryItem.description.icontains(search, autoescape=True),
                    InventoryItem.sku.icontains(search, autoescape=True),
                )
            )
        if category:
            stmt = stmt.where(InventoryItem.category == category)
        if stock is StockLevel.IN_STOCK:
            stmt = stmt.where(InventoryItem.quantity > low_stock_threshold)
        elif stock is StockLevel.LOW_STOCK:
            stmt = stmt.where(InventoryItem.quantity > 0, InventoryItem.quantity <= low_stock_threshold)
        elif stock is StockLevel.OUT_OF_STOCK:
            stmt = stmt.where(InventoryItem.quantity == 0)
        result = await self.session.execute(
            stmt.options(selectinload(InventoryItem.owner)).order_by(InventoryItem.created_at.desc())
        )
        return list(result.scalars().all())

    async def add(self, entity: InventoryItem) -> InventoryItem:
        try:
            return await super().add(entity)
        except IntegrityError as exc:
            if _is_sku_violation(exc):
                logger.info("Unique index rejected duplicate SKU %r", entity.sku)
                raise DuplicateSKUError() from exc
            raise

    async def update_fields(
        self, id: str, changes: dict[str, Any], *, owner_id: str | None = None
    ) -> bool:
        """One conditional UPDATE. Returns False when no row matched (gone, or not owned)."""
        stmt = self._scoped(
            update(InventoryItem).where(InventoryItem.id == id), owner_id
        ).values(**changes, updated_at=utcnow())
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            if _is_sku_violation(exc):
                logger.info("Unique index rejected SKU change on item %s", id)
                raise DuplicateSKUError() from exc
            raise
        return result.rowcount > 0

    async def delete_by_id(self, id: str, *, owner_id: str | None = None) -> bool:
        """One conditional DELETE. Returns False when no row matched."""
        stmt = self._scoped(delete(InventoryItem).where(InventoryItem.id == id), owner_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def total_value(self, *, owner_id: str | None = None) -> Decimal:
        """Sum of quantity x price."""
        stmt = self._scoped(
            select(func.coalesce(func.sum(InventoryItem.quantity * InventoryItem.price), 0)),
            owner_id,
        )
        result = await self.session.execute(stmt)
        return Decimal(str(result.scalar_one()))

    async def stock_counts(
        self, *, owner_id: str | None = None, low_stock_threshold: int = 10
    ) -> tuple[int, int, int]:
        """(total, low stock, out of stock) in a single aggregate query."""
        low = case(
            (
                (InventoryItem.quantity > 0) & (InventoryItem.quantity <= low_stock_threshold),
                1,
            ),
            else_=0,
        )
        out = case((InventoryItem.quantity == 0, 1), else_=0)
        stmt = self._scoped(
            select(
                func.count(InventoryItem.id),
                func.coalesce(func.sum(low), 0),
                func.coalesce(func.sum(out), 0),
            ),
            owner_id,
        )
        total, low_count, out_count = (await self.session.execute(stmt)).one()
        return int(total), int(low_count), int(out_count)

    async def categories(self, *, owner_id: str | None = None) -> list[str]:
        stmt = self._scoped(select(InventoryItem.category).distinct(), owner_id)
        result = await self.session.execute(stmt.order_by(InventoryItem.category))
        return list(result.scalars().all())
