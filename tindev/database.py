"""Database configuration and session management.

This module provides the core database functionality including:
1. Async SQLAlchemy engine setup with connection pooling
2. Session management
3. Dependency injection for FastAPI
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)

from tindev.core.config import settings
from tindev.core.exceptions import DatabaseError
from tindev.core.logging import get_logger

logger = get_logger(__name__)


# Create async engine with connection pooling
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_DEBUG,
    pool_pre_ping=True,  # Ensure connections are valid before use
    **settings.get_db_pool_settings(),
)

# Create async session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,  # Don't auto-flush - explicit is better than implicit
)


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    This context manager ensures proper cleanup of the session.

    Yields:
        AsyncSession: Database session
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Each request gets its own session.

    Yields:
        AsyncSession: Database session
    """
    async with get_session() as session:
        yield session


async def init_db() -> None:
    """Verify database connectivity during application startup.

    Raises:
        DatabaseError: If database connection fails
    """
    try:
        logger.debug("Testing database connection")
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
    except Exception as e:
        raise DatabaseError("Failed to initialize database", original_error=e) from e


async def check_db() -> bool:
    """Return whether the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        return False


async def close_db() -> None:
    """Close database connections on application shutdown."""
    try:
        logger.debug("Closing database connections")
        await engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        raise DatabaseError("Failed to close database connections", original_error=e) from e
