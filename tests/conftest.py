"""
PyTest configuration file containing test fixtures.
"""
import os

# Must be set before tindev.core.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TOKEN_SECRET", "test-token-secret")

from typing import Any, AsyncGenerator, Awaitable, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tindev.core.logging import setup_logging
from tindev.models import Base, Company, Developer, JobRecruitment, Photo, User
from tindev.models.base import generate_id
from tindev.services.media import PublitioClient

PREVIEW_URL = "https://media.publit.io/file/preview.jpg"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with async_session() as session:
        yield session


@pytest.fixture
def mock_db_session() -> MagicMock:
    """Create a mock database session for unit tests."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging() -> None:
    """Set up logging for tests."""
    setup_logging(log_level="DEBUG")


@pytest.fixture
def mock_media_client() -> AsyncMock:
    """Media host client answering every file lookup."""
    client = AsyncMock(spec=PublitioClient)
    client.show_file.return_value = {"success": True, "url_preview": PREVIEW_URL}
    client.health_check.return_value = True
    return client


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Factory for persisted accounts."""
    async def _make(**overrides: Any) -> User:
        user_id = overrides.pop("id", generate_id())
        data = {
            "id": user_id,
            "email": f"{user_id}@example.com",
            "role": "Developer",
            "secret_key": "user-salt",
        }
        data.update(overrides)
        user = User(**data)
        db_session.add(user)
        await db_session.commit()
        return user
    return _make


@pytest.fixture
def make_developer(db_session: AsyncSession) -> Callable[..., Awaitable[Developer]]:
    """Factory for persisted developer profiles."""
    async def _make(**overrides: Any) -> Developer:
        data = {
            "user_id": generate_id(),
            "email": "linh.tran@example.com",
            "full_name": "Linh Tran",
            "birthday": "1995-04-12",
            "phone": "0901234567",
            "gender": "Female",
            "city": "Ho Chi Minh",
            "skills": ["python", "postgresql"],
            "job_type": "Backend",
            "year_experience": 3,
            "expected_salary": 1500,
            "work_place": "Ho Chi Minh",
        }
        data.update(overrides)
        developer = Developer(**data)
        db_session.add(developer)
        await db_session.commit()
        return developer
    return _make


@pytest.fixture
def make_company(db_session: AsyncSession) -> Callable[..., Awaitable[Company]]:
    """Factory for persisted company profiles."""
    async def _make(**overrides: Any) -> Company:
        data = {
            "user_id": generate_id(),
            "name": "Saigon Software",
            "email": "hr@saigonsoft.example",
            "phone": "0281234567",
            "city": "Ho Chi Minh",
            "tax_code": "0312345678",
        }
        data.update(overrides)
        company = Company(**data)
        db_session.add(company)
        await db_session.commit()
        return company
    return _make


@pytest.fixture
def make_job(db_session: AsyncSession) -> Callable[..., Awaitable[JobRecruitment]]:
    """Factory for persisted job recruitments; ``user_id`` names the owner."""
    async def _make(**overrides: Any) -> JobRecruitment:
        data = {
            "user_id": generate_id(),
            "title": "Backend Engineer",
            "work_place": "Ho Chi Minh",
            "expired_date": "2026-12-31",
            "from_salary": 1000,
            "to_salary": 2000,
            "job_type": "Backend",
            "skills": ["python"],
            "year_experience": 2,
            "created_date": "2026-10-01",
        }
        data.update(overrides)
        job = JobRecruitment(**data)
        db_session.add(job)
        await db_session.commit()
        return job
    return _make


@pytest.fixture
def make_photo(db_session: AsyncSession) -> Callable[..., Awaitable[Photo]]:
    """Factory for persisted photo metadata."""
    async def _make(**overrides: Any) -> Photo:
        data = {
            "title": "avatar",
            "publit_io_id": "pub123",
            "album_id": generate_id(),
            "url_preview": "https://stored.example/avatar.jpg",
            "url_thumbnail": "https://stored.example/avatar_thumb.jpg",
        }
        data.update(overrides)
        photo = Photo(**data)
        db_session.add(photo)
        await db_session.commit()
        return photo
    return _make


@pytest_asyncio.fixture
async def company(make_company: Callable[..., Awaitable[Company]]) -> Company:
    return await make_company()


@pytest_asyncio.fixture
async def developer(make_developer: Callable[..., Awaitable[Developer]]) -> Developer:
    return await make_developer()


@pytest_asyncio.fixture
async def job(
    make_job: Callable[..., Awaitable[JobRecruitment]], company: Company
) -> JobRecruitment:
    """A posting owned by ``company``."""
    return await make_job(user_id=company.user_id)
