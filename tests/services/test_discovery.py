"""Tests for the discovery sampler."""
import random
from unittest.mock import AsyncMock

import pytest

from tindev.core.config import settings
from tindev.core.exceptions import NotFoundError
from tindev.services.discovery import CandidateSample, Dimension, DiscoverySampler
from tindev.services.media import PhotoResolver


class FixedRandom(random.Random):
    """Random source that always picks the given dimension."""

    def __init__(self, dimension: Dimension) -> None:
        super().__init__(0)
        self.dimension = dimension

    def choice(self, seq):
        return self.dimension


@pytest.fixture
def photo_resolver() -> AsyncMock:
    resolver = AsyncMock(spec=PhotoResolver)
    resolver.resolve.return_value = "https://media.example/dev.jpg"
    return resolver


def make_sampler(db_session, photo_resolver, dimension=None, **kwargs) -> DiscoverySampler:
    rng = FixedRandom(dimension) if dimension else random.Random(42)
    return DiscoverySampler(db_session, photo_resolver, rng=rng, **kwargs)


@pytest.mark.parametrize(
    "dimension, matching, other",
    [
        (Dimension.SALARY, {"expected_salary": 1500}, {"expected_salary": 5000}),
        (Dimension.JOB_TYPE, {"job_type": "Backend"}, {"job_type": "Frontend"}),
        (Dimension.YEAR_EXPERIENCE, {"year_experience": 4}, {"year_experience": 1}),
        (Dimension.WORK_PLACE, {"work_place": "Ho Chi Minh"}, {"work_place": "Ha Noi"}),
    ],
)
async def test_sample_developers_by_dimension(
    db_session, photo_resolver, company, job, make_developer, dimension, matching, other
):
    """Test each dimension filters developers against the company's posting."""
    # job: salary 1000-2000, Backend, 2 years, Ho Chi Minh
    base = {"expected_salary": 9999, "job_type": "Mobile", "year_experience": 0, "work_place": "Remote"}
    wanted = await make_developer(**{**base, **matching})
    await make_developer(**{**base, **other})

    sample = await make_sampler(db_session, photo_resolver, dimension).sample_developers(company.user_id)

    assert isinstance(sample, CandidateSample)
    assert sample.dimension is dimension
    assert [d.id for d in sample.candidates] == [wanted.id]
    assert sample.photo_url == "https://media.example/dev.jpg"
    photo_resolver.resolve.assert_awaited_once_with(wanted.photo_id)


async def test_salary_range_bounds_are_inclusive(db_session, photo_resolver, company, job, make_developer):
    """Test developers at either end of the posting's range qualify."""
    low = await make_developer(expected_salary=job.from_salary)
    high = await make_developer(expected_salary=job.to_salary)
    await make_developer(expected_salary=job.to_salary + 1)

    sample = await make_sampler(db_session, photo_resolver, Dimension.SALARY).sample_developers(
        company.user_id
    )

    assert {d.id for d in sample.candidates} == {low.id, high.id}


async def test_sample_size_is_capped(db_session, photo_resolver, company, job, make_developer):
    """Test at most sample_size candidates are returned."""
    for _ in range(4):
        await make_developer()

    sampler = make_sampler(db_session, photo_resolver, Dimension.JOB_TYPE, sample_size=3)
    sample = await sampler.sample_developers(company.user_id)

    assert len(sample.candidates) == 3


def test_limits_default_to_current_settings(db_session, photo_resolver, monkeypatch):
    """Test limits are read from settings when the sampler is built."""
    monkeypatch.setattr(settings, "DISCOVERY_MAX_ATTEMPTS", 3)
    monkeypatch.setattr(settings, "DISCOVERY_SAMPLE_SIZE", 5)

    sampler = make_sampler(db_session, photo_resolver)

    assert sampler.max_attempts == 3
    assert sampler.sample_size == 5


async def test_company_without_postings_not_found(db_session, photo_resolver, company, developer):
    """Test every attempt fails when the company owns no posting."""
    sampler = make_sampler(db_session, photo_resolver)

    with pytest.raises(NotFoundError) as exc_info:
        await sampler.sample_developers(company.user_id)

    assert exc_info.value.resource == "developer"
    photo_resolver.resolve.assert_not_awaited()


async def test_no_candidates_after_all_attempts(db_session, photo_resolver, company, job, make_developer):
    """Test NotFound once every dimension comes back empty."""
    await make_developer(expected_salary=9999, job_type="Mobile", year_experience=0, work_place="Remote")
    sampler = make_sampler(db_session, photo_resolver, max_attempts=10)
    sampler.developers.sample = AsyncMock(wraps=sampler.developers.sample)

    with pytest.raises(NotFoundError):
        await sampler.sample_developers(company.user_id)

    assert sampler.developers.sample.await_count == 10


@pytest.mark.parametrize(
    "dimension, matching, other",
    [
        (Dimension.SALARY, {"from_salary": 1000, "to_salary": 2000}, {"from_salary": 3000, "to_salary": 4000}),
        (Dimension.JOB_TYPE, {"job_type": "Backend"}, {"job_type": "Frontend"}),
        (Dimension.YEAR_EXPERIENCE, {"year_experience": 5}, {"year_experience": 1}),
        (Dimension.WORK_PLACE, {"work_place": "Ho Chi Minh"}, {"work_place": "Ha Noi"}),
    ],
)
async def test_sample_job_recruitments_by_dimension(
    db_session, photo_resolver, developer, make_job, dimension, matching, other
):
    """Test each dimension filters postings against the developer's expectation."""
    # developer: expects 1500, Backend, 3 years, Ho Chi Minh
    base = {"from_salary": 5000, "to_salary": 6000, "job_type": "Mobile",
            "year_experience": 0, "work_place": "Remote"}
    wanted = await make_job(**{**base, **matching})
    await make_job(**{**base, **other})

    sample = await make_sampler(db_session, photo_resolver, dimension).sample_job_recruitments(
        developer.user_id
    )

    assert sample.dimension is dimension
    assert [j.id for j in sample.candidates] == [wanted.id]
    assert sample.photo_url is None
    photo_resolver.resolve.assert_not_awaited()


async def test_developer_without_profile_not_found(db_session, photo_resolver):
    """Test sampling for a caller with no developer profile."""
    with pytest.raises(NotFoundError) as exc_info:
        await make_sampler(db_session, photo_resolver).sample_job_recruitments("nobody")

    assert exc_info.value.resource == "developer"


async def test_no_postings_not_found(db_session, photo_resolver, developer):
    """Test NotFound with an empty posting store."""
    with pytest.raises(NotFoundError) as exc_info:
        await make_sampler(db_session, photo_resolver).sample_job_recruitments(developer.user_id)

    assert exc_info.value.resource == "job recruitment"
