"""Inventory item request/response schemas - REST API contract and per-field rules."""

import enum
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from inventory_tracker.core.policy import Role

SKU_PATTERN = r"^[A-Za-z0-9-]+$"
MAX_PRICE = Decimal("999999.99")
CENT = Decimal("0.01")


class StockLevel(str, enum.Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


def _check_name(value: str) -> str:
    # Both bounds apply to the trimmed value; the value itself is kept as supplied
    trimmed = len(value.strip())
    if trimmed < 2:
        raise ValueError("Product name must be at least 2 characters")
    if trimmed > 100:
        raise ValueError("Product name must be at most 100 characters")
    return value


def _coerce_price(value: Any) -> Any:
    # bool is an int subclass; floats go through repr so 9.99 stays 9.99
    if isinstance(value, bool):
        raise ValueError("Price must be a number")
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


def _check_cents(value: Decimal) -> Decimal:
    if value != value.quantize(CENT):
        raise ValueError("Price can only have up to 2 decimal places")
    return value


# Raw cap matches the column; surrounding whitespace is stored as supplied
ItemName = Annotated[str, Field(max_length=255), AfterValidator(_check_name)]
Description = Annotated[str, Field(max_length=500)]
Quantity = Annotated[int, Field(strict=True, ge=0, le=999999)]
Price = Annotated[
    Decimal,
    BeforeValidator(_coerce_price),
    Field(ge=0, le=MAX_PRICE),
    AfterValidator(_check_cents),
]
Category = Annotated[str, Field(min_length=1, max_length=50)]
Sku = Annotated[str, Field(min_length=1, max_length=50, pattern=SKU_PATTERN)]

# Decimal would otherwise serialize as a JSON string
JsonPrice = Annotated[Decimal, PlainSerializer(float, return_type=float)]


class ItemCreate(BaseModel):
    """Full schema: every required field must be present. Unknown keys (owner included) are dropped."""

    name: ItemName
    description: Description | None = None
    quantity: Quantity
    price: Price
    category: Category
    sku: Sku


class ItemUpdate(BaseModel):
    """Partial schema. Presence is read from model_fields_set, never from None sentinels."""

    name: ItemName | None = None
    description: Description | None = None
    quantity: Quantity | None = None
    price: Price | None = None
    category: Category | None = None
    sku: Sku | None = None

    @field_validator("name", "quantity", "price", "category", "sku")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually supplied."""
        return self.model_dump(include=self.model_fields_set)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ItemOwner(CamelModel):
    id: str
    name: str | None = None
    email: str
    role: Role


class ItemResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    quantity: int
    price: JsonPrice
    category: str
    sku: str
    owner_id: str
    owner: ItemOwner | None = None
    created_at: datetime
    updated_at: datetime


class InventorySummary(CamelModel):
    total_items: int
    total_value: float
    low_stock_items: int
    out_of_stock_items: int
    categories: list[str]


class MessageResponse(BaseModel):
    message: str
