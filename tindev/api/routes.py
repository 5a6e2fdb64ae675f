"""API routes for the Tindev matching service."""
from fastapi import APIRouter

from tindev.api.v1 import companies, developers, health, job_recruitments, matchings

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(developers.router, prefix="/developers", tags=["developers"])
router.include_router(companies.router, prefix="/companies", tags=["companies"])
router.include_router(
    job_recruitments.router, prefix="/job-recruitments", tags=["job recruitments"]
)
router.include_router(matchings.router, prefix="/matchings", tags=["matchings"])
