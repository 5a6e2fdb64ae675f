"""Company API endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.api.dependencies import get_photo_resolver
from tindev.core.exceptions import NotFoundError, TindevError
from tindev.core.security import CurrentUser, get_current_user
from tindev.database import get_db
from tindev.models.enums import Role
from tindev.repositories.profile import CompanyRepository
from tindev.schemas.profile import CompanyProfile
from tindev.services.media import PhotoResolver

router = APIRouter()


@router.get("/my-info", response_model=CompanyProfile)
async def my_info(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
    photo_resolver: PhotoResolver = Depends(get_photo_resolver),
) -> CompanyProfile:
    """Profile of the calling company, with its photo URL."""
    try:
        current_user.require(Role.COMPANY)
        company = await CompanyRepository(session).get_by_user_id(current_user.user_id)
        if company is None:
            raise NotFoundError("company", current_user.user_id)
        profile = CompanyProfile.model_validate(company)
        profile.photo_url = await photo_resolver.resolve(company.photo_id)
        return profile
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)


@router.get("/user-id={user_id}", response_model=CompanyProfile)
async def get_by_user_id(
    user_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> CompanyProfile:
    """Profile of the company owned by ``user_id``."""
    try:
        company = await CompanyRepository(session).get_by_user_id(user_id)
        if company is None:
            raise NotFoundError("company", user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return CompanyProfile.model_validate(company)
