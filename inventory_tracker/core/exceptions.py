"""
Error taxonomy - every failure surfaced to a caller has a stable kind.
Challenge: Let the HTTP boundary pick a status code without inspecting messages.
Design: Services raise these; main.py registers one handler that renders them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single payload violation: which field, and a human-readable reason."""

    field: str
    message: str


class InventoryTrackerError(Exception):
    """Base class. Subclasses fix the status code, code and default message."""

    status_code: int = 500
    code: str = "internal_error"
    message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"error": self.message, "code": self.code}


class UnauthenticatedError(InventoryTrackerError):
    status_code = 401
    code = "unauthenticated"
    message = "Authentication required"


class InvalidCredentialsError(UnauthenticatedError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class UserExistsError(InventoryTrackerError):
    status_code = 409
    code = "user_exists"
    message = "User already exists with this email"


class UserNotFoundError(InventoryTrackerError):
    status_code = 404
    code = "user_not_found"
    message = "User not found"


class ForbiddenError(InventoryTrackerError):
    status_code = 403
    code = "forbidden"
    message = "You don't have permission to access this item"


class ItemNotFoundError(InventoryTrackerError):
    status_code = 404
    code = "item_not_found"
    message = "Inventory item not found"


class PayloadValidationError(InventoryTrackerError):
    """Carries every violated field, in field declaration order."""

    status_code = 400
    code = "validation_error"
    message = "Validation failed"

    def __init__(self, errors: list[FieldError], message: str | None = None):
        self.errors = list(errors)
        super().__init__(message)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def to_body(self) -> dict:
        body = super().to_body()
        body["details"] = [{"field": e.field, "message": e.message} for e in self.errors]
        return body


class DuplicateSKUError(InventoryTrackerError):
    status_code = 409
    code = "duplicate_sku"
    message = "SKU already exists"


class StorageUnavailableError(InventoryTrackerError):
    status_code = 503
    code = "storage_unavailable"
    message = "Storage backend unavailable. Check the database configuration."


class InternalError(InventoryTrackerError):
    pass
