"""Response schemas for matching, discovery and match lists."""
from typing import List

from pydantic import Field

from tindev.schemas.base import BaseSchema
from tindev.schemas.profile import CompanyProfile, DeveloperProfile, JobRecruitmentSchema
from tindev.services.matching import Decision, DecisionOutcome


class DecisionResponse(BaseSchema):
    """Result of a like or dislike."""

    outcome: DecisionOutcome
    message: str = Field(..., description="Message shown to the user")
    matching_id: str

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            outcome=decision.outcome,
            message=decision.outcome.message,
            matching_id=decision.matching.id,
        )


class DeveloperListResponse(BaseSchema):
    developers: List[DeveloperProfile]


class CompanyListResponse(BaseSchema):
    companies: List[CompanyProfile]


class JobRecruitmentListResponse(BaseSchema):
    job_recruitments: List[JobRecruitmentSchema]
