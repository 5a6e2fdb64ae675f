"""Random candidate discovery for the swipe screens."""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tindev.core.config import settings
from tindev.core.exceptions import NotFoundError
from tindev.core.logging import get_logger
from tindev.models.developer import Developer
from tindev.models.job_recruitment import JobRecruitment
from tindev.repositories.profile import DeveloperRepository, JobRecruitmentRepository
from tindev.services.media import PhotoResolver

logger = get_logger(__name__)


class Dimension(str, Enum):
    """Attribute a candidate sample is filtered on."""

    SALARY = "expected_salary"
    JOB_TYPE = "job_type"
    YEAR_EXPERIENCE = "year_experience"
    WORK_PLACE = "work_place"


@dataclass
class CandidateSample:
    """Candidates drawn on one dimension.

    ``photo_url`` belongs to the first candidate and is only resolved for
    developer samples.
    """

    dimension: Dimension
    candidates: List[Any] = field(default_factory=list)
    photo_url: Optional[str] = None


class DiscoverySampler:
    """Draw random counterparts that share one attribute with the caller."""

    def __init__(
        self,
        session: AsyncSession,
        photo_resolver: PhotoResolver,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
        sample_size: Optional[int] = None,
    ) -> None:
        """Initialize sampler.

        Args:
            session: Database session
            photo_resolver: Resolves the first developer's photo
            rng: Random source, a fresh one by default
            max_attempts: Dimension draws before giving up, from settings by default
            sample_size: Candidates returned per sample, from settings by default
        """
        self.developers = DeveloperRepository(session)
        self.jobs = JobRecruitmentRepository(session)
        self.photo_resolver = photo_resolver
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts or settings.DISCOVERY_MAX_ATTEMPTS
        self.sample_size = sample_size or settings.DISCOVERY_SAMPLE_SIZE

    def _pick_dimension(self) -> Dimension:
        return self.rng.choice(list(Dimension))

    async def sample_developers(self, company_user_id: str) -> CandidateSample:
        """Sample developers matching one of the company's own postings.

        Every attempt draws a fresh posting and a fresh dimension.

        Args:
            company_user_id: User id of the calling company

        Returns:
            Up to ``sample_size`` developers, the first with its photo URL

        Raises:
            NotFoundError: If no attempt yields a developer
        """
        for attempt in range(1, self.max_attempts + 1):
            dimension = self._pick_dimension()
            job = await self.jobs.sample_owned(company_user_id)
            if job is None:
                logger.debug("Company has no job recruitment to sample from",
                             company_user_id=company_user_id, attempt=attempt)
                continue

            developers = await self._developers_for(dimension, job)
            logger.debug("Sampled developers", dimension=dimension.value,
                         job_recruitment_id=job.id, found=len(developers), attempt=attempt)
            if developers:
                photo_url = await self.photo_resolver.resolve(developers[0].photo_id)
                return CandidateSample(dimension, developers, photo_url)

        raise NotFoundError("developer", context={"company_user_id": company_user_id})

    async def sample_job_recruitments(self, developer_user_id: str) -> CandidateSample:
        """Sample postings matching the developer's job expectation.

        Args:
            developer_user_id: User id of the calling developer

        Returns:
            Up to ``sample_size`` job recruitments

        Raises:
            NotFoundError: If the developer has no profile or no attempt yields a posting
        """
        developer = await self.developers.get_by_user_id(developer_user_id)
        if developer is None:
            raise NotFoundError("developer", developer_user_id)

        for attempt in range(1, self.max_attempts + 1):
            dimension = self._pick_dimension()
            jobs = await self._jobs_for(dimension, developer)
            logger.debug("Sampled job recruitments", dimension=dimension.value,
                         developer_user_id=developer_user_id, found=len(jobs), attempt=attempt)
            if jobs:
                return CandidateSample(dimension, jobs)

        raise NotFoundError("job recruitment", context={"developer_user_id": developer_user_id})

    async def _developers_for(self, dimension: Dimension, job: JobRecruitment) -> List[Developer]:
        size = self.sample_size
        queries: dict[Dimension, Callable[[], Awaitable[List[Developer]]]] = {
            Dimension.SALARY: lambda: self.developers.sample_for_salary_range(
                job.from_salary, job.to_salary, size=size),
            Dimension.JOB_TYPE: lambda: self.developers.sample_for_job_type(job.job_type, size=size),
            Dimension.YEAR_EXPERIENCE: lambda: self.developers.sample_for_experience(
                job.year_experience, size=size),
            Dimension.WORK_PLACE: lambda: self.developers.sample_for_work_place(
                job.work_place, size=size),
        }
        return await queries[dimension]()

    async def _jobs_for(self, dimension: Dimension, developer: Developer) -> List[JobRecruitment]:
        size = self.sample_size
        queries: dict[Dimension, Callable[[], Awaitable[List[JobRecruitment]]]] = {
            Dimension.SALARY: lambda: self.jobs.sample_for_salary(developer.expected_salary, size=size),
            Dimension.JOB_TYPE: lambda: self.jobs.sample_for_job_type(developer.job_type, size=size),
            Dimension.YEAR_EXPERIENCE: lambda: self.jobs.sample_for_experience(
                developer.year_experience, size=size),
            Dimension.WORK_PLACE: lambda: self.jobs.sample_for_work_place(
                developer.work_place, size=size),
        }
        return await queries[dimension]()
