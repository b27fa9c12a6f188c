"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep queries in one place for optimization and reuse.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from inventory_tracker.core.exceptions import UserExistsError
from inventory_tracker.db.models.user import User
from inventory_tracker.db.repositories.base_repository import BaseRepository


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """User-specific queries. Emails are compared case-insensitively."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for authentication."""
        result = await self.session.execute(
            select(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one_or_none()

    async def add(self, entity: User) -> User:
        """Insert a user; the unique email index turns a concurrent sign-up into UserExistsError."""
        entity.email = normalize_email(entity.email)
        try:
            return await super().add(entity)
        except IntegrityError as exc:
            raise UserExistsError() from exc
