"""FastAPI dependencies wiring services to a request."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.database import get_db
from tindev.services.discovery import DiscoverySampler
from tindev.services.matching import MatchingEngine, ScopeLocks
from tindev.services.media import PhotoResolver, PublitioClient
from tindev.services.views import MatchingViews


def get_media_client(request: Request) -> PublitioClient:
    """Media host client created by the application lifespan."""
    return request.app.state.media_client


def get_photo_resolver(
    session: AsyncSession = Depends(get_db),
    media_client: PublitioClient = Depends(get_media_client),
) -> PhotoResolver:
    return PhotoResolver(session, media_client)


def get_scope_locks(request: Request) -> ScopeLocks:
    """Per-pair lock registry created by the application lifespan."""
    return request.app.state.scope_locks


def get_matching_engine(
    session: AsyncSession = Depends(get_db),
    locks: ScopeLocks = Depends(get_scope_locks),
) -> MatchingEngine:
    return MatchingEngine(session, locks)


def get_discovery_sampler(
    session: AsyncSession = Depends(get_db),
    photo_resolver: PhotoResolver = Depends(get_photo_resolver),
) -> DiscoverySampler:
    return DiscoverySampler(session, photo_resolver)


def get_matching_views(session: AsyncSession = Depends(get_db)) -> MatchingViews:
    return MatchingViews(session)
