"""Match list API endpoints.

Company callers get ``{"developers": [...]}``, developer callers get
``{"companies": [...]}``.
"""
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException

from tindev.api.dependencies import get_matching_views
from tindev.core.exceptions import TindevError
from tindev.core.security import CurrentUser, get_current_user
from tindev.models.enums import Role
from tindev.schemas.matching import CompanyListResponse, DeveloperListResponse
from tindev.schemas.profile import CompanyProfile, DeveloperProfile
from tindev.services.views import MatchingViews, Profile

router = APIRouter()

MatchListResponse = Union[DeveloperListResponse, CompanyListResponse]


def _as_response(profiles: List[Profile], role: Role) -> MatchListResponse:
    if role is Role.COMPANY:
        return DeveloperListResponse(
            developers=[DeveloperProfile.model_validate(p) for p in profiles]
        )
    return CompanyListResponse(companies=[CompanyProfile.model_validate(p) for p in profiles])


@router.get("", response_model=MatchListResponse)
async def list_matches(
    current_user: CurrentUser = Depends(get_current_user),
    views: MatchingViews = Depends(get_matching_views),
) -> MatchListResponse:
    """Counterparts the caller matched with."""
    try:
        profiles = await views.list_mutual_matches(current_user.user_id, current_user.role)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return _as_response(profiles, current_user.role)


@router.get("/liked", response_model=MatchListResponse)
async def list_received_likes(
    current_user: CurrentUser = Depends(get_current_user),
    views: MatchingViews = Depends(get_matching_views),
) -> MatchListResponse:
    """Counterparts who liked the caller."""
    try:
        profiles = await views.list_received_likes(current_user.user_id, current_user.role)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return _as_response(profiles, current_user.role)


@router.get("/disliked", response_model=MatchListResponse)
async def list_my_dislikes(
    current_user: CurrentUser = Depends(get_current_user),
    views: MatchingViews = Depends(get_matching_views),
) -> MatchListResponse:
    """Counterparts the caller disliked."""
    try:
        profiles = await views.list_my_dislikes(current_user.user_id, current_user.role)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return _as_response(profiles, current_user.role)
