"""Developer and company profile repositories."""
import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.models.company import Company
from tindev.models.developer import Developer
from tindev.models.job_recruitment import JobRecruitment
from tindev.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class DeveloperRepository(BaseRepository[Developer]):
    """Repository for developer profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with Developer model."""
        super().__init__(Developer, session)

    async def get_by_user_id(self, user_id: str) -> Optional[Developer]:
        """Get the developer profile owned by a user."""
        return await self.get_by_attribute("user_id", user_id)

    async def get_many_by_user_ids(self, user_ids: Sequence[str]) -> dict[str, Developer]:
        """Load several developer profiles, keyed by user id."""
        if not user_ids:
            return {}
        developers = await self._scalars(
            select(Developer).where(Developer.user_id.in_(user_ids)), "load"
        )
        return {developer.user_id: developer for developer in developers}

    async def sample_for_salary_range(
        self, from_salary: int, to_salary: int, *, size: int
    ) -> list[Developer]:
        """Developers whose expected salary falls within a posting's range."""
        return await self.sample(
            Developer.expected_salary >= from_salary,
            Developer.expected_salary <= to_salary,
            size=size,
        )

    async def sample_for_job_type(self, job_type: str, *, size: int) -> list[Developer]:
        return await self.sample(Developer.job_type == job_type, size=size)

    async def sample_for_experience(self, min_years: int, *, size: int) -> list[Developer]:
        return await self.sample(Developer.year_experience >= min_years, size=size)

    async def sample_for_work_place(self, work_place: str, *, size: int) -> list[Developer]:
        return await self.sample(Developer.work_place == work_place, size=size)


class CompanyRepository(BaseRepository[Company]):
    """Repository for company profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with Company model."""
        super().__init__(Company, session)

    async def get_by_user_id(self, user_id: str) -> Optional[Company]:
        """Get the company profile owned by a user."""
        return await self.get_by_attribute("user_id", user_id)

    async def get_many_by_user_ids(self, user_ids: Sequence[str]) -> dict[str, Company]:
        """Load several company profiles, keyed by user id."""
        if not user_ids:
            return {}
        companies = await self._scalars(
            select(Company).where(Company.user_id.in_(user_ids)), "load"
        )
        return {company.user_id: company for company in companies}


class JobRecruitmentRepository(BaseRepository[JobRecruitment]):
    """Repository for job postings."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with JobRecruitment model."""
        super().__init__(JobRecruitment, session)

    async def list_by_owner(self, user_id: str) -> list[JobRecruitment]:
        """All postings owned by a company user."""
        return await self._scalars(
            select(JobRecruitment)
            .where(JobRecruitment.user_id == user_id)
            .order_by(JobRecruitment.created_date),
            "list by owner",
        )

    async def sample_owned(self, user_id: str) -> Optional[JobRecruitment]:
        """Pick one random posting owned by a company user."""
        jobs = await self.sample(JobRecruitment.user_id == user_id, size=1)
        return jobs[0] if jobs else None

    async def sample_for_salary(self, expected_salary: int, *, size: int) -> list[JobRecruitment]:
        """Postings whose salary range contains the expected salary."""
        return await self.sample(
            JobRecruitment.from_salary <= expected_salary,
            JobRecruitment.to_salary >= expected_salary,
            size=size,
        )

    async def sample_for_job_type(self, job_type: str, *, size: int) -> list[JobRecruitment]:
        return await self.sample(JobRecruitment.job_type == job_type, size=size)

    async def sample_for_experience(self, min_years: int, *, size: int) -> list[JobRecruitment]:
        return await self.sample(JobRecruitment.year_experience >= min_years, size=size)

    async def sample_for_work_place(self, work_place: str, *, size: int) -> list[JobRecruitment]:
        return await self.sample(JobRecruitment.work_place == work_place, size=size)
