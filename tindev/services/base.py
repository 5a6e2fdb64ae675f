"""Base service class for standardizing service lifecycle management."""
import abc
from datetime import datetime, timezone
from typing import Optional

from tindev.core.exceptions import ServiceError
from tindev.core.logging import get_logger

logger = get_logger(__name__)


class BaseService(abc.ABC):
    """Base class for long-lived services owned by the application."""

    def __init__(self) -> None:
        """Initialize service."""
        self.initialized = False
        self.last_health_check: Optional[datetime] = None
        self.name = self.__class__.__name__

    async def init(self) -> None:
        """Initialize service with required resources."""
        try:
            await self._init_resources()
        except Exception as e:
            raise ServiceError(f"Failed to initialize {self.name}", original_error=e) from e

        self.initialized = True
        self.last_health_check = datetime.now(timezone.utc)
        logger.info(f"{self.name} initialized", service=self.name, action="init")

    async def close(self) -> None:
        """Close service and cleanup resources."""
        try:
            await self._cleanup_resources()
        except Exception as e:
            raise ServiceError(f"Failed to close {self.name}", original_error=e) from e

        self.initialized = False
        logger.info(f"{self.name} closed", service=self.name, action="close")

    async def health_check(self) -> bool:
        """Check if service is healthy.

        Returns:
            True if service is healthy
        """
        if not self.initialized:
            return False

        try:
            is_healthy = await self._check_health()
        except Exception as e:
            logger.error(f"Health check failed for {self.name}", service=self.name, error=str(e))
            return False

        if is_healthy:
            self.last_health_check = datetime.now(timezone.utc)
        return is_healthy

    @abc.abstractmethod
    async def _init_resources(self) -> None:
        """Initialize service-specific resources."""

    @abc.abstractmethod
    async def _cleanup_resources(self) -> None:
        """Cleanup service-specific resources."""

    @abc.abstractmethod
    async def _check_health(self) -> bool:
        """Check service-specific health."""
