"""Media host client and display-photo resolution.

Photos are stored on Publitio; the database only keeps their metadata. The
client is created once per process by the application lifespan and handed to
whatever needs it, see ``tindev.api.dependencies.get_media_client``.
"""
import hashlib
import secrets
import time
from typing import Any, Dict, Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from tindev.core.config import settings
from tindev.core.exceptions import MediaHostError
from tindev.core.logging import get_logger
from tindev.models.photo import Photo
from tindev.repositories.photo import PhotoRepository
from tindev.services.base import BaseService

logger = get_logger(__name__)


class PublitioClient(BaseService):
    """Async client for the Publitio REST API."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = "https://api.publit.io/v1",
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_wait: Optional[wait_base] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Publitio API key
            api_secret: Publitio API secret, used only to sign requests
            base_url: API root
            timeout: Per-request timeout in seconds
            max_retries: Attempts per request on transport failures
            retry_wait: Wait strategy between attempts
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        super().__init__()
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_wait = retry_wait or wait_exponential(multiplier=0.5, max=4)
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls) -> "PublitioClient":
        return cls(
            settings.PUBLITIO_API_KEY,
            settings.PUBLITIO_API_SECRET,
            base_url=settings.PUBLITIO_BASE_URL,
            timeout=settings.MEDIA_TIMEOUT,
            max_retries=settings.MEDIA_MAX_RETRIES,
        )

    async def _init_resources(self) -> None:
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _cleanup_resources(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    async def _check_health(self) -> bool:
        return self.client is not None and not self.client.is_closed

    def signed_params(self) -> Dict[str, str]:
        """Authentication query parameters for one request.

        The signature is the SHA-1 of timestamp, nonce and secret concatenated.
        """
        timestamp = str(int(time.time()))
        nonce = f"{secrets.randbelow(10 ** 8):08d}"
        signature = hashlib.sha1(f"{timestamp}{nonce}{self.api_secret}".encode()).hexdigest()
        return {
            "api_key": self.api_key,
            "api_timestamp": timestamp,
            "api_nonce": nonce,
            "api_signature": signature,
        }

    async def _get(self, path: str) -> httpx.Response:
        if self.client is None:
            raise MediaHostError("Media host client is not initialized", context={"path": path})

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                return await self.client.get(path, params=self.signed_params())

    async def show_file(self, file_id: str) -> Dict[str, Any]:
        """Fetch a file's metadata.

        Args:
            file_id: Publitio file id

        Returns:
            Decoded response body, including ``url_preview``

        Raises:
            MediaHostError: If the request fails or the API reports an error
        """
        path = f"/files/show/{file_id}"
        try:
            response = await self._get(path)
        except httpx.HTTPError as e:
            raise MediaHostError(
                f"Media host request failed for file {file_id}",
                context={"file_id": file_id},
                original_error=e,
            ) from e

        if response.status_code != 200:
            raise MediaHostError(
                f"Media host returned {response.status_code} for file {file_id}",
                context={"file_id": file_id, "status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MediaHostError(
                f"Media host returned invalid JSON for file {file_id}",
                context={"file_id": file_id},
                original_error=e,
            ) from e

        if not data.get("success", True):
            raise MediaHostError(
                f"Media host rejected request for file {file_id}",
                context={"file_id": file_id, "error": data.get("error")},
            )
        return data


class PhotoResolver:
    """Resolve the display URL of a profile photo."""

    def __init__(self, session: AsyncSession, media_client: PublitioClient) -> None:
        self.photos = PhotoRepository(session)
        self.media_client = media_client

    async def resolve(self, photo_id: Optional[str]) -> Optional[str]:
        """Return the preview URL for a photo, or for the default photo.

        Args:
            photo_id: Id of the profile's photo; may be empty

        Returns:
            Preview URL, or None when neither the photo nor a default exists
        """
        photo = await self.photos.get_active(photo_id) if photo_id else None
        if photo is None:
            photo = await self.photos.get_default()
            if photo is None:
                logger.warning("No default photo configured", photo_id=photo_id)
                return None
        return await self._preview_url(photo)

    async def _preview_url(self, photo: Photo) -> Optional[str]:
        try:
            data = await self.media_client.show_file(photo.publit_io_id)
        except MediaHostError as e:
            # Stored preview may be stale but is better than nothing
            logger.warning(
                "Falling back to stored photo preview",
                photo_id=photo.id,
                error=e.message,
            )
            return photo.url_preview
        return data.get("url_preview") or photo.url_preview
