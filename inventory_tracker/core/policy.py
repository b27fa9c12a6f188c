"""
Authorization policy - pure allow/deny decisions (no I/O, no side effects).
Challenge: One place that decides who may touch which item.
Design: Services ask the policy; they never compare roles themselves.
"""

import enum

from inventory_tracker.core.exceptions import ForbiddenError


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class Action(str, enum.Enum):
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


def _as_role(role) -> Role | None:
    try:
        return Role(role)
    except ValueError:
        return None


def is_admin(actor_role) -> bool:
    return _as_role(actor_role) is Role.ADMIN


def can_access(actor_role, actor_id: str, resource_owner_id: str, action) -> bool:
    """ADMIN may do anything; USER only on resources it owns; other roles nothing."""
    try:
        Action(action)
    except ValueError:
        return False
    role = _as_role(actor_role)
    if role is Role.ADMIN:
        return True
    if role is Role.USER:
        return actor_id == resource_owner_id
    return False


def can_create(actor_role) -> bool:
    """Any recognised role may create. Ownership is forced to the actor by the caller."""
    return _as_role(actor_role) is not None


def list_scope(actor_role, actor_id: str) -> str | None:
    """Owner id a listing must be restricted to, or None for every owner.

    Equivalent to post-filtering the unrestricted list on owner == actor.
    """
    role = _as_role(actor_role)
    if role is Role.ADMIN:
        return None
    if role is Role.USER:
        return actor_id
    raise ForbiddenError("Unrecognised role")
