"""
Item service - authorization-aware inventory operations (SOLID: Single Responsibility).
Challenge: Check ownership/role strictly before any write; keep controllers thin.
Design: Service depends on abstractions (repositories, policy); easy to test without HTTP.
"""

import logging
from typing import Any

from inventory_tracker.config import get_settings
from inventory_tracker.core.exceptions import DuplicateSKUError, ForbiddenError, ItemNotFoundError
from inventory_tracker.core.policy import Action, can_access, can_create, list_scope
from inventory_tracker.db.models.item import InventoryItem
from inventory_tracker.db.repositories.item_repository import ItemRepository
from inventory_tracker.schemas.item import InventorySummary, ItemResponse, StockLevel
from inventory_tracker.schemas.user import Identity
from inventory_tracker.services.validation import validate_item_payload

logger = logging.getLogger(__name__)

_DENIED = {
    Action.READ: "You don't have permission to access this item",
    Action.UPDATE: "You don't have permission to update this item",
    Action.DELETE: "You don't have permission to delete this item",
}


def _item_to_response(item: InventoryItem) -> ItemResponse:
    return ItemResponse.model_validate(item)


class ItemService:
    """Handles all item use cases for one actor-supplied request."""

    def __init__(self, item_repo: ItemRepository, low_stock_threshold: int | None = None):
        self.item_repo = item_repo
        if low_stock_threshold is None:
            low_stock_threshold = get_settings().low_stock_threshold
        self.low_stock_threshold = low_stock_threshold

    async def _load_authorized(self, id: str, actor: Identity, action: Action) -> InventoryItem:
        """Existence first (404), then policy (403)."""
        item = await self.item_repo.get_by_id_with_owner(id)
        if item is None:
            raise ItemNotFoundError()
        if not can_access(actor.role, actor.id, item.owner_id, action):
            logger.warning(
                "Denied %s on item %s to user %s (owner %s)", action.value, id, actor.id, item.owner_id
            )
            raise ForbiddenError(_DENIED[action])
        return item

    def _write_scope(self, actor: Identity) -> str | None:
        # Repeats the ownership condition inside the write itself
        return list_scope(actor.role, actor.id)

    async def create(self, payload: Any, actor: Identity) -> ItemResponse:
        """Create an item owned by the actor. Any owner field in the payload is ignored."""
        if not can_create(actor.role):
            raise ForbiddenError("You don't have permission to create items")
        data = validate_item_payload(payload, partial=False)
        if await self.item_repo.get_by_sku(data.sku) is not None:
            logger.info("Rejected duplicate SKU %r from user %s", data.sku, actor.id)
            raise DuplicateSKUError()
        item = await self.item_repo.add(InventoryItem(**data.model_dump(), owner_id=actor.id))
        logger.info("User %s created item %s", actor.id, item.id)
        # Reload with owner loaded to avoid lazy load in async context (MissingGreenlet)
        item = await self.item_repo.get_by_id_with_owner(item.id, refresh=True)
        return _item_to_response(item)

    async def get(self, id: str, actor: Identity) -> ItemResponse:
        item = await self._load_authorized(id, actor, Action.READ)
        return _item_to_response(item)

    async def list_items(
        self,
        actor: Identity,
        *,
        search: str | None = None,
        category: str | None = None,
        stock: StockLevel | None = None,
    ) -> list[ItemResponse]:
        """ADMIN sees every item, USER only its own; most recent first."""
        items = await self.item_repo.list_with_owner(
            owner_id=list_scope(actor.role, actor.id),
            search=search,
            category=category,
            stock=stock,
            low_stock_threshold=self.low_stock_threshold,
        )
        return [_item_to_response(i) for i in items]

    async def update(self, id: str, payload: Any, actor: Identity) -> ItemResponse:
        """Apply only the supplied fields. Re-setting the item's own SKU is allowed."""
        await self._load_authorized(id, actor, Action.UPDATE)
        changes = validate_item_payload(payload, partial=True).changes()
        if "sku" in changes:
            holder = await self.item_repo.get_by_sku(changes["sku"])
            if holder is not None and holder.id != id:
                logger.info("Rejected SKU change on item %s: %r already taken", id, changes["sku"])
                raise DuplicateSKUError()
        if not await self.item_repo.update_fields(id, changes, owner_id=self._write_scope(actor)):
            raise ItemNotFoundError()
        logger.info("User %s updated item %s (%s)", actor.id, id, ", ".join(sorted(changes)) or "no fields")
        item = await self.item_repo.get_by_id_with_owner(id, refresh=True)
        return _item_to_response(item)

    async def delete(self, id: str, actor: Identity) -> None:
        await self._load_authorized(id, actor, Action.DELETE)
        if not await self.item_repo.delete_by_id(id, owner_id=self._write_scope(actor)):
            raise ItemNotFoundError()
        logger.info("User %s deleted item %s", actor.id, id)

    async def summary(self, actor: Identity) -> InventorySummary:
        """Dashboard figures over the items the actor can see."""
        owner_id = list_scope(actor.role, actor.id)
        total, low, out = await self.item_repo.stock_counts(
            owner_id=owner_id, low_stock_threshold=self.low_stock_threshold
        )
        value = await self.item_repo.total_value(owner_id=owner_id)
        return InventorySummary(
            total_items=total,
            total_value=round(float(value), 2),
            low_stock_items=low,
            out_of_stock_items=out,
            categories=await self.item_repo.categories(owner_id=owner_id),
        )
