"""Matching repository for database operations."""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.models.enums import Role
from tindev.models.matching import Matching
from tindev.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scope:
    """Key of one interaction thread between a company and a developer."""

    company_user_id: str
    developer_user_id: str
    job_recruitment_id: Optional[str] = None

    @property
    def pair(self) -> tuple[str, str]:
        return (self.company_user_id, self.developer_user_id)

    def profile_level(self) -> "Scope":
        """The same pair at the profile level (no job recruitment)."""
        return replace(self, job_recruitment_id=None)


class MatchingRepository(BaseRepository[Matching]):
    """Repository for matching operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with Matching model."""
        super().__init__(Matching, session)

    async def get_for_scope(self, scope: Scope, *, for_update: bool = False) -> Optional[Matching]:
        """Get the row of exactly this scope.

        Args:
            scope: Scope to look up; a null job recruitment id only matches
                profile-level rows
            for_update: Lock the row until the transaction ends

        Returns:
            Matching if found, None otherwise
        """
        query = select(Matching).where(
            Matching.company_user_id == scope.company_user_id,
            Matching.developer_user_id == scope.developer_user_id,
        )
        if scope.job_recruitment_id is None:
            query = query.where(Matching.job_recruitment_id.is_(None))
        else:
            query = query.where(Matching.job_recruitment_id == scope.job_recruitment_id)
        if for_update:
            query = query.with_for_update()
        return await self._scalar_one_or_none(query, "get for scope")

    async def create_decision(self, scope: Scope, role: Role, liked: bool) -> Matching:
        """Open a new row with only one side's decision set."""
        matching = Matching(
            company_user_id=scope.company_user_id,
            developer_user_id=scope.developer_user_id,
            job_recruitment_id=scope.job_recruitment_id,
        )
        matching.set_decision(role, liked)
        self.session.add(matching)
        await self.session.flush()
        return matching

    async def list_for_user(
        self,
        user_id: str,
        role: Role,
        *,
        my_like: Optional[bool] = None,
        their_like: Optional[bool] = None,
    ) -> list[Matching]:
        """Rows involving a user, filtered on either side's decision.

        Args:
            user_id: The user whose rows to scan
            role: Which side ``user_id`` is on
            my_like: Required value of the user's own decision, if given
            their_like: Required value of the counterpart's decision, if given

        Returns:
            Rows in creation order
        """
        if role is Role.COMPANY:
            owner_column = Matching.company_user_id
            my_column, their_column = Matching.is_company_like, Matching.is_developer_like
        else:
            owner_column = Matching.developer_user_id
            my_column, their_column = Matching.is_developer_like, Matching.is_company_like

        query = select(Matching).where(owner_column == user_id)
        if my_like is not None:
            query = query.where(my_column.is_(my_like))
        if their_like is not None:
            query = query.where(their_column.is_(their_like))
        return await self._scalars(
            query.order_by(Matching.created_at, Matching.id), "list for user"
        )
