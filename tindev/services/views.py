"""Read-only match lists built from matching rows."""
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from tindev.core.logging import get_logger
from tindev.models.company import Company
from tindev.models.developer import Developer
from tindev.models.enums import Role
from tindev.repositories.matching import MatchingRepository
from tindev.repositories.profile import CompanyRepository, DeveloperRepository

logger = get_logger(__name__)

Profile = Union[Developer, Company]


class MatchingViews:
    """Counterpart lists for a caller: matches, received likes and dislikes."""

    def __init__(self, session: AsyncSession) -> None:
        self.matchings = MatchingRepository(session)
        self.developers = DeveloperRepository(session)
        self.companies = CompanyRepository(session)

    async def list_mutual_matches(self, user_id: str, role: Role) -> List[Profile]:
        """Counterparts where both sides liked."""
        return await self._counterparts(user_id, Role(role), my_like=True, their_like=True)

    async def list_received_likes(self, user_id: str, role: Role) -> List[Profile]:
        """Counterparts who liked the caller, whatever the caller decided."""
        return await self._counterparts(user_id, Role(role), their_like=True)

    async def list_my_dislikes(self, user_id: str, role: Role) -> List[Profile]:
        """Counterparts the caller disliked."""
        return await self._counterparts(user_id, Role(role), my_like=False)

    async def _counterparts(
        self,
        user_id: str,
        role: Role,
        *,
        my_like: Optional[bool] = None,
        their_like: Optional[bool] = None,
    ) -> List[Profile]:
        rows = await self.matchings.list_for_user(
            user_id, role, my_like=my_like, their_like=their_like
        )

        # First-seen order, one entry per counterpart
        counterpart_ids = list(dict.fromkeys(row.counterpart_user_id(role) for row in rows))

        if role is Role.COMPANY:
            profiles = await self.developers.get_many_by_user_ids(counterpart_ids)
        else:
            profiles = await self.companies.get_many_by_user_ids(counterpart_ids)

        missing = [uid for uid in counterpart_ids if uid not in profiles]
        if missing:
            logger.warning("Skipping counterparts without a profile", user_id=user_id,
                           role=role.value, missing=missing)
        return [profiles[uid] for uid in counterpart_ids if uid in profiles]
