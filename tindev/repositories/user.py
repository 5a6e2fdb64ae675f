"""User repository for database operations."""
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.models.user import User
from tindev.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for accounts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)
