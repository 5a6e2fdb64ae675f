"""Developer API endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.api.dependencies import (
    get_discovery_sampler,
    get_matching_engine,
    get_photo_resolver,
)
from tindev.core.exceptions import NotFoundError, TindevError
from tindev.core.security import CurrentUser, get_current_user
from tindev.database import get_db
from tindev.models.enums import Role, TargetKind
from tindev.repositories.profile import DeveloperRepository
from tindev.schemas.matching import DecisionResponse, DeveloperListResponse
from tindev.schemas.profile import DeveloperProfile
from tindev.services.discovery import DiscoverySampler
from tindev.services.matching import MatchingEngine
from tindev.services.media import PhotoResolver

router = APIRouter()


@router.get("", response_model=List[DeveloperProfile])
async def list_developers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> List[DeveloperProfile]:
    """List developer profiles."""
    try:
        developers = await DeveloperRepository(session).list(skip=skip, limit=limit)
        return [DeveloperProfile.model_validate(developer) for developer in developers]
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)


@router.get("/random", response_model=DeveloperListResponse)
async def random_developers(
    current_user: CurrentUser = Depends(get_current_user),
    sampler: DiscoverySampler = Depends(get_discovery_sampler),
) -> DeveloperListResponse:
    """Sample developers suited to one of the calling company's postings.

    Raises:
        HTTPException: 401 for non-company callers, 404 when nothing matches
    """
    try:
        current_user.require(Role.COMPANY)
        sample = await sampler.sample_developers(current_user.user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)

    developers = [DeveloperProfile.model_validate(developer) for developer in sample.candidates]
    developers[0].photo_url = sample.photo_url
    return DeveloperListResponse(developers=developers)


@router.get("/my-info", response_model=DeveloperProfile)
async def my_info(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
    photo_resolver: PhotoResolver = Depends(get_photo_resolver),
) -> DeveloperProfile:
    """Profile of the calling developer, with its photo URL."""
    try:
        current_user.require(Role.DEVELOPER)
        return await _profile_with_photo(session, photo_resolver, current_user.user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)


@router.get("/user-id={user_id}", response_model=DeveloperProfile)
async def get_by_user_id(
    user_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
    photo_resolver: PhotoResolver = Depends(get_photo_resolver),
) -> DeveloperProfile:
    """Profile of the developer owned by ``user_id``, with its photo URL."""
    try:
        return await _profile_with_photo(session, photo_resolver, user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)


@router.post("/like/{developer_id}", response_model=DecisionResponse)
async def like_developer(
    developer_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    engine: MatchingEngine = Depends(get_matching_engine),
) -> DecisionResponse:
    """Like a developer on behalf of the calling company."""
    return await _decide(engine, current_user, developer_id, liked=True)


@router.post("/dislike/{developer_id}", response_model=DecisionResponse)
async def dislike_developer(
    developer_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    engine: MatchingEngine = Depends(get_matching_engine),
) -> DecisionResponse:
    """Dislike a developer on behalf of the calling company."""
    return await _decide(engine, current_user, developer_id, liked=False)


async def _decide(
    engine: MatchingEngine, current_user: CurrentUser, developer_id: str, liked: bool
) -> DecisionResponse:
    try:
        decision = await engine.record_decision(
            current_user.role,
            current_user.user_id,
            TargetKind.DEVELOPER,
            developer_id,
            liked,
        )
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return DecisionResponse.from_decision(decision)


async def _profile_with_photo(
    session: AsyncSession, photo_resolver: PhotoResolver, user_id: str
) -> DeveloperProfile:
    developer = await DeveloperRepository(session).get_by_user_id(user_id)
    if developer is None:
        raise NotFoundError("developer", user_id)
    profile = DeveloperProfile.model_validate(developer)
    profile.photo_url = await photo_resolver.resolve(developer.photo_id)
    return profile
