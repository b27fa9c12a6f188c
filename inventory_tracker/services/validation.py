"""
Item payload validation - schema-checks payloads before they reach storage.
Challenge: Report every violated field at once, in a stable order.
"""

from typing import Any

from pydantic import ValidationError

from inventory_tracker.core.exceptions import FieldError, PayloadValidationError
from inventory_tracker.schemas.item import ItemCreate, ItemUpdate


def field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten pydantic errors to (field, message) pairs, keeping pydantic's order."""
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        errors.append(FieldError(field=field, message=err["msg"].removeprefix("Value error, ")))
    return errors


def validate_item_payload(payload: Any, partial: bool = False) -> ItemCreate | ItemUpdate:
    """Validate a create (full) or update (partial) payload.

    Raises PayloadValidationError listing every violation. The partial schema
    checks only supplied fields, each against the same rule as the full one.
    """
    if not isinstance(payload, dict):
        raise PayloadValidationError([FieldError("body", "Payload must be a JSON object")])
    schema = ItemUpdate if partial else ItemCreate
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(field_errors(exc)) from exc
