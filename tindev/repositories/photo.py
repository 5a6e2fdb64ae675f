"""Photo repository for database operations."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.models.photo import Photo
from tindev.repositories.base import BaseRepository


class PhotoRepository(BaseRepository[Photo]):
    """Repository for photo metadata."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Photo, session)

    async def get_active(self, photo_id: str) -> Optional[Photo]:
        """Get a photo that has not been deleted."""
        return await self._scalar_one_or_none(
            select(Photo).where(Photo.id == photo_id, Photo.is_deleted.is_(False)),
            "get active",
        )

    async def get_default(self) -> Optional[Photo]:
        """Get the photo shown when a profile has none."""
        return await self._scalar_one_or_none(
            select(Photo).where(Photo.is_default.is_(True)).limit(1),
            "get default",
        )
