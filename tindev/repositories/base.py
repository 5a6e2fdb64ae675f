"""Base repository class for database operations."""
import logging
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement, Select

from tindev.core.exceptions import DatabaseError
from tindev.models.base import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: SQLAlchemy async session
        """
        self.model = model
        self.session = session

    async def _scalar_one_or_none(self, query: Select, action: str) -> Optional[ModelType]:
        try:
            result = await self.session.execute(query)
            return result.scalar_one_or_none()
        except Exception as e:
            raise DatabaseError(
                message=f"Failed to {action} {self.model.__name__}",
                context={"model": self.model.__name__},
                original_error=e,
            ) from e

    async def _scalars(self, query: Select, action: str) -> list[ModelType]:
        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            raise DatabaseError(
                message=f"Failed to {action} {self.model.__name__}",
                context={"model": self.model.__name__},
                original_error=e,
            ) from e

    async def get(self, id: Any) -> Optional[ModelType]:
        """Get model by primary key.

        Args:
            id: Primary key value

        Returns:
            Model instance if found, None otherwise
        """
        return await self._scalar_one_or_none(
            select(self.model).where(self.model.id == id), "get"
        )

    async def get_by_attribute(self, attr: str, value: Any) -> Optional[ModelType]:
        """Get model by attribute value.

        Args:
            attr: Model attribute name
            value: Attribute value to match

        Returns:
            Model instance if found, None otherwise
        """
        return await self._scalar_one_or_none(
            select(self.model).where(getattr(self.model, attr) == value),
            f"get by {attr}",
        )

    async def sample(self, *criteria: ColumnElement[bool], size: int = 1) -> list[ModelType]:
        """Pick up to ``size`` random rows matching all criteria.

        Args:
            *criteria: SQL filter expressions
            size: Maximum number of rows to return

        Returns:
            Randomly ordered model instances
        """
        query = select(self.model).where(*criteria).order_by(func.random()).limit(size)
        return await self._scalars(query, "sample")

    async def list(
        self,
        *,
        skip: int = 0,
        limit: int = 100,
        query: Optional[Select] = None,
    ) -> list[ModelType]:
        """Get list of models with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            query: Optional custom query to execute

        Returns:
            List of model instances
        """
        if query is None:
            query = select(self.model)
        return await self._scalars(query.offset(skip).limit(limit), "list")
