"""
Credential verification - sign-in, sign-up, demo and OAuth identities.
Challenge: Produce an identity claim without ever mutating an existing user's role or password.
Design: Depends on UserRepository only; JWT issuance stays in the endpoint layer.
"""

import enum
import logging
import secrets

from fastapi.concurrency import run_in_threadpool

from inventory_tracker.config import Settings, get_settings
from inventory_tracker.core.exceptions import InvalidCredentialsError, UserExistsError
from inventory_tracker.core.policy import Role
from inventory_tracker.core.security import dummy_verify, hash_password, verify_password
from inventory_tracker.db.models.user import User
from inventory_tracker.db.repositories.user_repository import UserRepository, normalize_email
from inventory_tracker.schemas.user import Identity

logger = logging.getLogger(__name__)

DEMO_USER_NAME = "Demo User"


class AuthMode(str, enum.Enum):
    SIGN_IN = "SIGN_IN"
    SIGN_UP = "SIGN_UP"


def requested_role(role: str | None) -> Role:
    """Only an explicit "ADMIN" yields ADMIN; anything else, including junk, is USER."""
    return Role.ADMIN if role == Role.ADMIN.value else Role.USER


class CredentialVerifier:
    """Turns credentials into an Identity. Creates at most one user per call."""

    def __init__(self, user_repo: UserRepository, settings: Settings | None = None):
        self.user_repo = user_repo
        self.settings = settings or get_settings()

    async def verify(
        self,
        email: str,
        password: str,
        mode: AuthMode,
        *,
        name: str | None = None,
        role: str | None = None,
    ) -> Identity:
        if self._is_demo_login(email, password):
            return await self._demo_identity()
        if mode is AuthMode.SIGN_UP:
            return await self._sign_up(email, password, name, role)
        return await self._sign_in(email, password)

    async def resolve_oauth_identity(self, email: str, name: str | None = None) -> Identity:
        """Get or create an OAuth-only account for an email the provider already verified.

        Entry point for the external OAuth callback; the handshake itself lives outside this service.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            user = await self.user_repo.add(User(email=email, name=name, role=Role.USER))
            logger.info("Created OAuth user %s", user.id)
        return Identity.model_validate(user)

    def _is_demo_email(self, email: str) -> bool:
        return self.settings.demo_account_active and normalize_email(email) == normalize_email(
            self.settings.demo_email
        )

    def _is_demo_login(self, email: str, password: str) -> bool:
        return self._is_demo_email(email) and secrets.compare_digest(
            password.encode(), self.settings.demo_password.encode()
        )

    async def _demo_identity(self) -> Identity:
        user = await self.user_repo.get_by_email(self.settings.demo_email)
        if user is None:
            user = await self.user_repo.add(
                User(email=self.settings.demo_email, name=DEMO_USER_NAME, role=Role.USER)
            )
            logger.info("Created demo user %s", user.id)
        elif user.hashed_password or user.role is not Role.USER:
            # The demo address was claimed as a regular account; never hand it out
            logger.warning("Demo login refused: %s is not a passwordless USER account", user.id)
            raise InvalidCredentialsError()
        return Identity.model_validate(user)

    async def _sign_up(self, email: str, password: str, name: str | None, role: str | None) -> Identity:
        if self._is_demo_email(email) or await self.user_repo.get_by_email(email) is not None:
            raise UserExistsError()
        hashed = await run_in_threadpool(hash_password, password)
        user = await self.user_repo.add(
            User(
                email=email,
                name=name or normalize_email(email).split("@")[0],
                hashed_password=hashed,
                role=requested_role(role),
            )
        )
        logger.info("Registered user %s with role %s", user.id, user.role.value)
        return Identity.model_validate(user)

    async def _sign_in(self, email: str, password: str) -> Identity:
        user = await self.user_repo.get_by_email(email)
        if user is None or not user.hashed_password:
            await run_in_threadpool(dummy_verify)
            logger.warning("Sign-in rejected: unknown email or no password set")
            raise InvalidCredentialsError()
        if not await run_in_threadpool(verify_password, password, user.hashed_password):
            logger.warning("Sign-in rejected: bad password for user %s", user.id)
            raise InvalidCredentialsError()
        return Identity.model_validate(user)
