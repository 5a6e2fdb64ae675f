"""Tests for profile and posting repositories."""
import pytest

from tindev.core.exceptions import DatabaseError
from tindev.repositories.photo import PhotoRepository
from tindev.repositories.profile import (
    CompanyRepository,
    DeveloperRepository,
    JobRecruitmentRepository,
)


async def test_developer_by_user_id(db_session, developer):
    """Test lookup by owning user."""
    repo = DeveloperRepository(db_session)

    found = await repo.get_by_user_id(developer.user_id)

    assert found.id == developer.id
    assert found.job_expectation == {
        "job_type": "Backend",
        "year_experience": 3,
        "expected_salary": 1500,
        "work_place": "Ho Chi Minh",
    }
    assert await repo.get_by_user_id("unknown") is None


async def test_get_many_by_user_ids(db_session, make_company):
    """Test bulk lookup keyed by user id."""
    first = await make_company(name="First")
    second = await make_company(name="Second")
    repo = CompanyRepository(db_session)

    found = await repo.get_many_by_user_ids([first.user_id, second.user_id, "missing"])

    assert set(found) == {first.user_id, second.user_id}
    assert await repo.get_many_by_user_ids([]) == {}


async def test_developer_sampling_filters(db_session, make_developer):
    """Test the attribute filters used by discovery."""
    junior = await make_developer(expected_salary=800, year_experience=1, job_type="Frontend", work_place="Ha Noi")
    senior = await make_developer(expected_salary=2500, year_experience=6, job_type="Backend", work_place="Remote")
    repo = DeveloperRepository(db_session)

    assert [d.id for d in await repo.sample_for_salary_range(500, 1000, size=10)] == [junior.id]
    assert [d.id for d in await repo.sample_for_experience(5, size=10)] == [senior.id]
    assert [d.id for d in await repo.sample_for_job_type("Frontend", size=10)] == [junior.id]
    assert [d.id for d in await repo.sample_for_work_place("Remote", size=10)] == [senior.id]
    assert len(await repo.sample(size=1)) == 1


async def test_job_recruitment_queries(db_session, company, make_job):
    """Test owner listing and posting sampling."""
    own = await make_job(user_id=company.user_id, from_salary=1000, to_salary=2000, year_experience=3)
    await make_job(from_salary=3000, to_salary=4000, year_experience=1)
    repo = JobRecruitmentRepository(db_session)

    assert [j.id for j in await repo.list_by_owner(company.user_id)] == [own.id]
    assert (await repo.sample_owned(company.user_id)).id == own.id
    assert await repo.sample_owned("nobody") is None
    assert [j.id for j in await repo.sample_for_salary(1500, size=10)] == [own.id]
    assert [j.id for j in await repo.sample_for_experience(2, size=10)] == [own.id]


async def test_photo_lookups(db_session, make_photo):
    """Test active and default photo lookups."""
    active = await make_photo()
    deleted = await make_photo(is_deleted=True)
    default = await make_photo(is_default=True)
    repo = PhotoRepository(db_session)

    assert (await repo.get_active(active.id)).id == active.id
    assert await repo.get_active(deleted.id) is None
    assert (await repo.get_default()).id == default.id


async def test_query_failure_wrapped(mock_db_session):
    """Test driver errors surface as DatabaseError."""
    mock_db_session.execute.side_effect = RuntimeError("connection reset")
    repo = DeveloperRepository(mock_db_session)

    with pytest.raises(DatabaseError) as exc_info:
        await repo.get_by_user_id("u1")

    assert exc_info.value.error_code == "DB_ERROR"
    assert isinstance(exc_info.value.original_error, RuntimeError)
