"""Pydantic models for profiles and job postings."""
from typing import List, Optional

from pydantic import Field

from tindev.schemas.base import BaseSchema


class JobExpectation(BaseSchema):
    """What a developer is looking for."""

    job_type: str = Field(..., description="Job type")
    year_experience: int = Field(..., ge=0, description="Years of experience")
    expected_salary: int = Field(..., ge=0, description="Expected salary")
    work_place: str = Field(..., description="Preferred work place")


class DeveloperProfile(BaseSchema):
    """Schema for developer profile responses."""

    id: str
    user_id: str
    email: str
    full_name: str
    birthday: str
    phone: str
    gender: str
    city: str
    photo_id: str = ""
    facebook_url: str = ""
    linkedin_url: str = ""
    twitter_url: str = ""
    description: str = ""
    skills: List[str] = Field(default_factory=list)
    status: str
    job_expectation: JobExpectation
    photo_url: Optional[str] = Field(None, description="Resolved display photo URL")


class CompanyProfile(BaseSchema):
    """Schema for company profile responses."""

    id: str
    user_id: str
    name: str
    email: str
    phone: str
    city: str
    tax_code: str
    photo_id: str = ""
    facebook_url: str = ""
    linkedin_url: str = ""
    twitter_url: str = ""
    description: str = ""
    status: str
    photo_url: Optional[str] = Field(None, description="Resolved display photo URL")


class JobRecruitmentSchema(BaseSchema):
    """Schema for job recruitment responses."""

    id: str
    user_id: str = Field(..., description="Owning company user id")
    title: str
    work_place: str
    expired_date: str
    from_salary: int
    to_salary: int
    job_type: str
    skills: List[str] = Field(default_factory=list)
    year_experience: int
    description: str = ""
    created_date: str
    status: str
