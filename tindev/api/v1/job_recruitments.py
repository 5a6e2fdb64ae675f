"""Job recruitment API endpoints."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.api.dependencies import get_discovery_sampler, get_matching_engine
from tindev.core.exceptions import NotFoundError, TindevError
from tindev.core.security import CurrentUser, get_current_user
from tindev.database import get_db
from tindev.models.enums import Role, TargetKind
from tindev.repositories.profile import JobRecruitmentRepository
from tindev.schemas.matching import DecisionResponse, JobRecruitmentListResponse
from tindev.schemas.profile import JobRecruitmentSchema
from tindev.services.discovery import DiscoverySampler
from tindev.services.matching import MatchingEngine

router = APIRouter()


@router.get("", response_model=List[JobRecruitmentSchema])
async def list_my_job_recruitments(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> List[JobRecruitmentSchema]:
    """Postings owned by the calling company."""
    try:
        current_user.require(Role.COMPANY)
        jobs = await JobRecruitmentRepository(session).list_by_owner(current_user.user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return [JobRecruitmentSchema.model_validate(job) for job in jobs]


@router.get("/random", response_model=JobRecruitmentListResponse)
async def random_job_recruitments(
    current_user: CurrentUser = Depends(get_current_user),
    sampler: DiscoverySampler = Depends(get_discovery_sampler),
) -> JobRecruitmentListResponse:
    """Sample postings suited to the calling developer's expectation.

    Raises:
        HTTPException: 401 for non-developer callers, 404 when nothing matches
    """
    try:
        current_user.require(Role.DEVELOPER)
        sample = await sampler.sample_job_recruitments(current_user.user_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return JobRecruitmentListResponse(
        job_recruitments=[JobRecruitmentSchema.model_validate(job) for job in sample.candidates]
    )


@router.get("/{job_id}", response_model=JobRecruitmentSchema)
async def get_job_recruitment(
    job_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> JobRecruitmentSchema:
    try:
        job = await JobRecruitmentRepository(session).get(job_id)
        if job is None:
            raise NotFoundError("job recruitment", job_id)
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return JobRecruitmentSchema.model_validate(job)


@router.post("/like/{job_id}", response_model=DecisionResponse)
async def like_job_recruitment(
    job_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    engine: MatchingEngine = Depends(get_matching_engine),
) -> DecisionResponse:
    """Like a posting on behalf of the calling developer."""
    return await _decide(engine, current_user, job_id, liked=True)


@router.post("/dislike/{job_id}", response_model=DecisionResponse)
async def dislike_job_recruitment(
    job_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    engine: MatchingEngine = Depends(get_matching_engine),
) -> DecisionResponse:
    """Dislike a posting on behalf of the calling developer."""
    return await _decide(engine, current_user, job_id, liked=False)


async def _decide(
    engine: MatchingEngine, current_user: CurrentUser, job_id: str, liked: bool
) -> DecisionResponse:
    try:
        decision = await engine.record_decision(
            current_user.role,
            current_user.user_id,
            TargetKind.JOB_RECRUITMENT,
            job_id,
            liked,
        )
    except TindevError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    return DecisionResponse.from_decision(decision)
