"""Pydantic schemas for API data validation."""
from tindev.schemas.base import BaseSchema
from tindev.schemas.health import HealthResponse
from tindev.schemas.matching import (
    CompanyListResponse,
    DecisionResponse,
    DeveloperListResponse,
    JobRecruitmentListResponse,
)
from tindev.schemas.profile import (
    CompanyProfile,
    DeveloperProfile,
    JobExpectation,
    JobRecruitmentSchema,
)

__all__ = [
    "BaseSchema",
    "CompanyListResponse",
    "CompanyProfile",
    "DecisionResponse",
    "DeveloperListResponse",
    "DeveloperProfile",
    "HealthResponse",
    "JobExpectation",
    "JobRecruitmentListResponse",
    "JobRecruitmentSchema",
]
