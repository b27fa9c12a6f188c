"""
FastAPI dependencies - injection for DB, auth and services (SOLID: Dependency Inversion).
Challenge: Reusable auth, consistent error responses, no ambient session state.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inventory_tracker.core.exceptions import UnauthenticatedError, UserNotFoundError
from inventory_tracker.core.security import token_subject
from inventory_tracker.db.repositories.item_repository import ItemRepository
from inventory_tracker.db.repositories.user_repository import UserRepository
from inventory_tracker.db.session import DbSession
from inventory_tracker.schemas.user import Identity
from inventory_tracker.services.auth_service import CredentialVerifier
from inventory_tracker.services.item_service import ItemService
from inventory_tracker.services.stats_service import StatsService

security = HTTPBearer(auto_error=False)


async def get_current_actor(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Resolve JWT to the stored user. 401 if no/invalid token, 404 if the user is gone."""
    if not credentials:
        raise UnauthenticatedError()
    user_id = token_subject(credentials.credentials)
    if user_id is None:
        raise UnauthenticatedError("Invalid or expired token")
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise UserNotFoundError()
    return Identity.model_validate(user)


CurrentActor = Annotated[Identity, Depends(get_current_actor)]


def get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return ItemService(ItemRepository(session))


def get_stats_service(session: DbSession) -> StatsService:
    return StatsService(ItemRepository(session), UserRepository(session))


def get_credential_verifier(session: DbSession) -> CredentialVerifier:
    return CredentialVerifier(UserRepository(session))


ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
VerifierDep = Annotated[CredentialVerifier, Depends(get_credential_verifier)]
