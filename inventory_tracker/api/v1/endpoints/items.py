"""
Inventory item endpoints - RESTful resource (GET/POST/PUT/PATCH/DELETE).
Challenge: Auth, ownership, validation, 404/403/409 handling.
Design: Thin controller; service layer holds business logic. Bodies are validated
by the service after the policy check, not by FastAPI before it.
"""

from typing import Any

from fastapi import APIRouter, Body, Query, status

from inventory_tracker.core.dependencies import CurrentActor, ItemServiceDep
from inventory_tracker.schemas.item import InventorySummary, ItemResponse, MessageResponse, StockLevel

router = APIRouter()


@router.get("", response_model=list[ItemResponse])
async def list_items(
    actor: CurrentActor,
    svc: ItemServiceDep,
    search: str | None = Query(None, max_length=100),
    category: str | None = Query(None, max_length=50),
    stock: StockLevel | None = Query(None),
):
    """List visible items, newest first. ADMIN sees everyone's, USER only its own."""
    return await svc.list_items(actor, search=search, category=category, stock=stock)


@router.get("/summary", response_model=InventorySummary)
async def inventory_summary(actor: CurrentActor, svc: ItemServiceDep):
    """Totals, stock levels and categories over the visible items."""
    return await svc.summary(actor)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(actor: CurrentActor, svc: ItemServiceDep, payload: Any = Body(...)):
    """Create item owned by the caller. Owner always comes from the token, never the body."""
    return await svc.create(payload, actor)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str, actor: CurrentActor, svc: ItemServiceDep):
    return await svc.get(item_id, actor)


@router.put("/{item_id}", response_model=ItemResponse)
@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(item_id: str, actor: CurrentActor, svc: ItemServiceDep, payload: Any = Body(...)):
    """Partial update: only supplied fields change."""
    return await svc.update(item_id, payload, actor)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: str, actor: CurrentActor, svc: ItemServiceDep):
    """Permanent delete."""
    await svc.delete(item_id, actor)
    return MessageResponse(message="Item deleted successfully")
